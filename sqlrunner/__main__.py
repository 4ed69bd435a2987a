from sqlrunner.cli.main import main

main()
