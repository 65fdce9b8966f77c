"""
TicTacToe
=========
Tic-Tac-Toe for one or two players, with an AI opponent at four
difficulty levels: Easy, Medium, Hard and Impossible (full minimax).

Packages: logic (board, rules, AI) and session (settings, scores, games).
"""

__version__ = "1.0.0"
