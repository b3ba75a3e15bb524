class ClapperError(Exception):
    pass


class CaptureError(ClapperError):
    pass
