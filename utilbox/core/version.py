from cement.utils.version import get_version as cement_get_version

# (major, minor, patch, stage, serial)
VERSION = (0, 3, 0, 'final', 0)


def get_version(version=VERSION):
    return cement_get_version(version)
