from busaddr.cli import main

main()
