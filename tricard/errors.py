"""Input errors raised at the parsing boundary.

Every error is a ``ValueError`` carrying a stable ``code`` so the console
program and the host can report it the same way.
"""


class ShowdownError(ValueError):
    code = "SHOWDOWN_ERROR"


class InvalidRankToken(ShowdownError):
    code = "INVALID_RANK"


class InvalidSuitToken(ShowdownError):
    code = "INVALID_SUIT"


class InvalidPlayerCount(ShowdownError):
    code = "INVALID_PLAYER_COUNT"


class MalformedRecord(ShowdownError):
    code = "MALFORMED_RECORD"


class DuplicatePlayer(MalformedRecord):
    code = "DUPLICATE_PLAYER"


class DuplicateCard(MalformedRecord):
    code = "DUPLICATE_CARD"


class EmptyInput(ShowdownError):
    code = "EMPTY_INPUT"
