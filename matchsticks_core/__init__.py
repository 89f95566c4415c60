"""
Matchsticks core Python package.

Game engine for two-player matchstick Nim, split into small modules so the
CLI, the Flask app and the tests can share one implementation.
Modules:
- board.py: Board, TurnInfo
- errors.py: StackDoesNotExist, NotEnoughMatches, InvalidMoveAmount, ParseError
- strategy.py: nim-sum analysis used by the automated player
- player.py: HumanPlayer, AutomatedPlayer, GameType
- engine.py: Game, Playing, Finished
"""
