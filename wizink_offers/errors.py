class OfferError(Exception):
    pass

class FetchFailure(OfferError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"fetch failed for {url}: {reason}")

class UnparsableDateRange(OfferError):
    def __init__(self, phrase: str, reason: str = "no recognized date pattern"):
        self.phrase = phrase
        super().__init__(f"{reason}: {phrase!r}")

class UnknownMonthName(UnparsableDateRange):
    def __init__(self, phrase: str, name: str):
        self.name = name
        super().__init__(phrase, reason=f"unknown month name {name!r}")

class StoreIOFailure(OfferError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"store {path}: {reason}")

class OutputIOFailure(OfferError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"output {path}: {reason}")
