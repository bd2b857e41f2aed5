class UtilBoxError(Exception):
    """Errors raised by utilbox helpers and the utilbox application."""

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg
