"""
Stamp digitlist/version.py with a new version code.

The version code is the release base, then the UTC moment of stamping:
    0.0.1.2026.1017.0930.05
version.py holds nothing but that code, as its docstring.  See digitlist.__version__
"""

import datetime

RELEASE_BASE = '0.0.1'
VERSION_MODULE = 'digitlist/version.py'


def version_code(moment):
    """Release base, dot, moment as yyyy.mmdd.hhmm.ss"""
    return '{base}.{moment:%Y.%m%d.%H%M.%S}'.format(base=RELEASE_BASE, moment=moment)
assert '0.0.1.2026.1017.0930.05' == version_code(datetime.datetime(2026, 10, 17, 9, 30, 5))


def stamp(path=VERSION_MODULE):
    code = version_code(datetime.datetime.now(datetime.timezone.utc))
    with open(path, 'w') as version_module:
        version_module.write('"""{}"""'.format(code))
    return code


if __name__ == '__main__':
    print(stamp())
