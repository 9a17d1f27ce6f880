from inventory_api.main import main

main()
