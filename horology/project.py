name = 'horology'
abstract = 'Calendar fields, periods, and zone offset resolution over millisecond instants.'
icon = '⌛'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
