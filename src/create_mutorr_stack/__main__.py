from create_mutorr_stack.cli import main

main()
