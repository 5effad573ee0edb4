"""Exception types raised by the listing source and inference client."""


class LandScoutError(Exception):
    pass


class ListingSourceError(LandScoutError):
    """The listing search API was unreachable or returned an error status."""


class ScrapeError(LandScoutError):
    """Browser scraping of the public listings page failed."""


class InferenceCallError(LandScoutError):
    """The AI completion endpoint could not be called or answered badly."""


class InferenceParseError(LandScoutError):
    """The AI reply did not contain a usable JSON object."""
