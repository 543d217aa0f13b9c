class DaprLoadTestException(Exception):
    pass
