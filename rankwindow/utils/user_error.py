
class UserError(ValueError):
    """
    Bad input from the command line, reported to the user without a traceback.

    The message is kept as a logging format string and its arguments, so the
    caller can pass them straight to a logger.
    """

    def __init__(self, fmt: str, *fmt_args: object):
        self.fmt = fmt
        self.fmt_args = fmt_args
        self.code = 1
        super().__init__(fmt % fmt_args if fmt_args else fmt)
