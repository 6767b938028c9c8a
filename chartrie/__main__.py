from chartrie.cli import main

main()
