DEFAULT_MESSAGE = "No such element"


class NoSuchElementError(ValueError):
    """空のOptionalから値を取り出そうとしたときに送出される例外。"""

    def __init__(self, message: str | None = None):
        self.message = message if message is not None else DEFAULT_MESSAGE
        super().__init__(self.message)
