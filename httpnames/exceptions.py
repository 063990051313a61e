class StatusCodeError(Exception):
    "Status Code Error"
    def __init__(self, code):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return "Status code not registered: {!r}".format(self.code)


class NotFoundError(StatusCodeError, KeyError):
    "Status name not found"
    def __str__(self):
        return "Status name not found: {!r}".format(self.code)


class UnknownCodeError(StatusCodeError, ValueError):
    pass
