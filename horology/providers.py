"""
# Sources of zone rules and zone names.

# A provider maps identifiers to zones; every provider must supply `'UTC'`.
# Name providers render the name keys recorded by a zone.

# [ Elements ]
# /UTCProvider/
	# Only provides UTC.
# /MappingProvider/
	# Provides the zones held by a dictionary.
# /ZoneInfoProvider/
	# Reads the TZif files of a zoneinfo directory.
# /DefaultNameProvider/
	# Presents the abbreviation recorded in the zone data.
# /validate_provider/
	# Check that a provider satisfies the requirements of the system configuration.
"""
import os
import os.path
import logging

from . import abstract
from . import errors
from . import zones
from . import tzif

log = logging.getLogger(__name__)

class UTCProvider(object):
	"""
	# Provider of the UTC zone alone.
	"""
	__slots__ = ()

	def zone(self, id):
		if id == 'UTC':
			return zones.UTC
		return None

	def ids(self):
		return {'UTC'}

class MappingProvider(object):
	"""
	# Provider of the zones in &mapping; `'UTC'` is added when absent.
	"""
	__slots__ = ('mapping',)

	def __init__(self, mapping):
		self.mapping = dict(mapping)
		self.mapping.setdefault('UTC', zones.UTC)

	def zone(self, id):
		return self.mapping.get(id)

	def ids(self):
		return set(self.mapping)

class ZoneInfoProvider(object):
	"""
	# Provider reading zones from the TZif files of &directory.

	# Loaded zones are cached for the life of the provider and wrapped in a
	# &zones.CachedZone.

	# [ Properties ]
	# /directory/
		# The root of the zoneinfo tree; `/usr/share/zoneinfo`.
	"""
	__slots__ = ('directory', 'cache', '_ids')

	def __init__(self, directory):
		if not os.path.isdir(directory):
			raise errors.InvalidConfiguration("zoneinfo directory does not exist: " + repr(directory))
		self.directory = directory
		self.cache = {}
		self._ids = None

	def path(self, id):
		"""
		# The file path of the zone identified by &id, or &None when &id
		# would leave the directory.
		"""
		if not id or id.startswith('/') or '..' in id.split('/'):
			return None
		return os.path.join(self.directory, id)

	def zone(self, id):
		if id == 'UTC':
			return zones.UTC

		try:
			return self.cache[id]
		except KeyError:
			pass

		path = self.path(id)
		if path is None or not os.path.isfile(path):
			log.debug("unknown zone identifier %r", id)
			return None

		try:
			z = tzif.load(path, id)
		except (OSError, ValueError) as err:
			log.warning("zone data for %r could not be read: %s", id, err)
			return None

		if z is None:
			log.warning("%r exists, but is not a TZif file", path)
			return None

		if not z.is_fixed():
			z = zones.CachedZone(z)

		log.debug("loaded zone %r from %r", id, path)
		return self.cache.setdefault(id, z)

	def ids(self):
		if self._ids is not None:
			return set(self._ids)

		found = {'UTC'}
		prefix = len(self.directory) + 1
		for dirpath, dirnames, filenames in os.walk(self.directory):
			dirnames.sort()
			for name in filenames:
				path = os.path.join(dirpath, name)
				try:
					if tzif.is_tzif(path):
						found.add(path[prefix:].replace(os.sep, '/'))
				except OSError:
					log.debug("skipping unreadable %r", path)

		self._ids = frozenset(found)
		return set(found)

class DefaultNameProvider(object):
	"""
	# Name provider presenting the abbreviations recorded by the zones.

	# Long names are not available; the abbreviation is used for both.
	"""
	__slots__ = ()

	def short_name(self, id, name_key, standard=True):
		return name_key or None

	def name(self, id, name_key, standard=True):
		return name_key or None

def validate_provider(provider):
	"""
	# Check that &provider lists its identifiers and supplies a UTC zone.

	# [ Returns ]
	# &provider.

	# [ Exceptions ]
	# /errors.InvalidConfiguration/
		# The provider does not satisfy the requirements.
	"""
	if not isinstance(provider, abstract.Provider):
		raise errors.InvalidConfiguration("The provider must implement zone and ids")
	ids = provider.ids()
	if not ids:
		raise errors.InvalidConfiguration("The provider doesn't have any available ids")
	if 'UTC' not in ids:
		raise errors.InvalidConfiguration("The provider doesn't support UTC")

	utc = provider.zone('UTC')
	if utc is None or not utc.is_fixed() or utc.offset(0) != 0:
		raise errors.InvalidConfiguration("Invalid UTC zone provided")
	return provider
