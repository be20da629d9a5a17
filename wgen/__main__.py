from wgen.cli import main

main()
