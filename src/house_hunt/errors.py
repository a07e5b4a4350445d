class HouseHuntError(Exception):
    ...


class InvalidInput(HouseHuntError):
    '''
    Raised before any request is made when the submitted form values can't
    be turned into a SearchCriteria. `field` names the offending input.
    '''

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class AreaSearchError(HouseHuntError):
    '''
    Failure scoped to a single search area. The coordinator turns these into
    a notice block for that area and keeps collecting the other areas.
    '''

    def __init__(self, message: str, area: str | None = None):
        super().__init__(message)
        self.area = area

    @property
    def kind(self) -> str:
        return type(self).__name__


class FetchFailed(AreaSearchError):

    def __init__(self, message: str, area: str | None = None, status_code: int | None = None):
        super().__init__(message, area)
        self.status_code = status_code


class ParseFailed(AreaSearchError):
    ...


class DateFormatFailed(AreaSearchError):
    ...


class SearchCancelled(AreaSearchError):
    ...
