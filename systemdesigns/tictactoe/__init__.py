"""Tic-tac-toe: pieces, players, board and game loop."""