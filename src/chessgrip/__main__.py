from chessgrip.app import main

main()
