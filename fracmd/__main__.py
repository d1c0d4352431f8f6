from fracmd.cli.main import main

main()
