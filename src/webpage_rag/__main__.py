from webpage_rag.cli import main

main()
