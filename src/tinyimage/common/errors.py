''' Loader error kinds '''


class LoaderError(Exception):
    pass


class ProgramIOError(LoaderError):
    ''' Program source is missing or unreadable '''
    pass


class ParseError(LoaderError):
    ''' A source line cannot be turned into an instruction '''

    reason: str
    line: str | None
    lineno: int | None
    source: str | None

    def __init__(self, reason: str, line: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.line = line
        self.lineno = None
        self.source = None

    def locate(self, source: str, lineno: int):
        self.source = source
        self.lineno = lineno
        return self

    def __str__(self):
        if self.lineno is None:
            return self.reason

        return f'{self.source}:{self.lineno}: {self.reason}: {self.line!r}'


class EncodingContractError(LoaderError):
    ''' A value does not fit the memory image format '''
    pass


class ConfigurationError(LoaderError):
    pass
