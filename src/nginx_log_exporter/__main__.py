from nginx_log_exporter.cli import main

main()
