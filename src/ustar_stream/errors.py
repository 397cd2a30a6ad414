ERRORS = {
  "E_HEADER_NAME": "Header name field is not NUL-terminated",
  "E_HEADER_SIZE_TERM": "Header size field is not NUL-terminated",
  "E_HEADER_SIZE": "Header size field is not a valid octal number",
}


class TarStreamError(ValueError):
    def __init__(self, code: str, detail: str | None = None):
        self.code = code
        self.detail = detail
        message = ERRORS[code]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidHeaderError(TarStreamError):
    """A ustar header block failed structural checks.

    ``block_index`` and ``offset`` are filled in by the parser once the
    failing block's position in the stream is known.
    """

    def __init__(self, code: str, detail: str | None = None):
        super().__init__(code, detail)
        self.block_index: int | None = None
        self.offset: int | None = None
