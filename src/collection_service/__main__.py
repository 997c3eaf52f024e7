from collection_service.main import main

main()
