from ts_typie.cli import main

main()
