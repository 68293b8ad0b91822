"""Stop search failures."""


class StopSearchError(Exception):
    pass


class NetworkFailure(StopSearchError):
    pass


class HttpStatusFailure(StopSearchError):
    def __init__(self, status_code: int, detail: str = "") -> None:
        message = f"Stop search returned status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status_code = status_code


class ParseFailure(StopSearchError):
    pass
