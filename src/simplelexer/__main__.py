from simplelexer.repl import main

main()
