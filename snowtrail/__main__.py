from snowtrail.cli import main

main()
