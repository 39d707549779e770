from chainconf.main import main

main()
