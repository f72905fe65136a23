from jitsu import settings


def debug_print(message):
    """Print debug messages only when JITSU_DEBUG is on"""
    if settings.DEBUG:
        print(message)
