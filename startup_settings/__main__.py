from startup_settings.main import main

main()
