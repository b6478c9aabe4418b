"""
# Process-wide configuration: the default zone, the zone provider, the name provider,
# and the millisecond clock.

# The configuration is held by a single &Environment instance, &environment. Each slot
# is resolved lazily on first access; concurrent first readers agree on one value as
# resolution is published with `dict.setdefault`. Administrative overrides replace the
# slot immediately and the last writer wins. Values already holding a zone or
# chronology are not affected by later overrides.

# [ Environment ]
# /HOROLOGY_TZ/
	# Identifier of the default zone; takes precedence over `TZ`.
# /TZ/
	# Identifier of the default zone; a leading colon is ignored.
# /HOROLOGY_TZDIR/
	# The zoneinfo directory; takes precedence over `TZDIR`.
# /TZDIR/
	# The zoneinfo directory.
"""
import os
import os.path
import time
import logging

from . import abstract
from . import errors
from . import zones
from . import providers

log = logging.getLogger(__name__)

tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'

class Environment(object):
	"""
	# Container of the configuration slots.

	# [ Properties ]
	# /slots/
		# Dictionary of resolved configuration values.
	# /environ/
		# The mapping consulted for environment variables; &os.environ by default.
	"""
	__slots__ = ('slots', 'environ', 'clock')

	def __init__(self, environ=None):
		self.slots = {}
		self.environ = os.environ if environ is None else environ
		self.clock = self.system_millis

	def _resolve(self, key, constructor):
		try:
			return self.slots[key]
		except KeyError:
			value = constructor()
			selected = self.slots.setdefault(key, value)
			if selected is value:
				log.info("resolved %s: %r", key, value)
			return selected

	def reset(self):
		"""
		# Clear all slots and restore the system clock.
		"""
		self.slots.clear()
		self.clock = self.system_millis

	# Provider

	def _directory(self):
		for var in ('HOROLOGY_TZDIR', 'TZDIR'):
			d = self.environ.get(var)
			if d:
				return d
		return tzdir

	def _load_provider(self):
		directory = self._directory()
		if os.path.isdir(directory):
			try:
				return providers.validate_provider(providers.ZoneInfoProvider(directory))
			except errors.InvalidConfiguration as err:
				log.warning("zoneinfo directory %r is not usable: %s", directory, err)
		return providers.UTCProvider()

	def provider(self):
		return self._resolve('provider', self._load_provider)

	def set_provider(self, provider):
		"""
		# Replace the zone provider; &None restores the default.
		"""
		if provider is None:
			provider = self._load_provider()
		else:
			providers.validate_provider(provider)
		self.slots['provider'] = provider
		log.info("provider set to %r", provider)

	# Name provider

	def names(self):
		return self._resolve('names', providers.DefaultNameProvider)

	def set_names(self, names):
		if names is None:
			names = providers.DefaultNameProvider()
		elif not isinstance(names, abstract.NameProvider):
			raise errors.InvalidConfiguration("The name provider must implement short_name and name")
		self.slots['names'] = names
		log.info("name provider set to %r", names)

	# Default zone

	def _configured_id(self):
		for var in ('HOROLOGY_TZ', 'TZ'):
			value = self.environ.get(var)
			if value:
				return value.lstrip(':')

		# The link target of /etc/localtime names the zone.
		target = os.path.realpath(tzdefault)
		i = target.rfind('/zoneinfo/')
		if i == -1:
			return None
		return target[i + 10:]

	def _load_default_zone(self):
		id = self._configured_id()
		if id is None:
			return zones.UTC

		if os.path.isabs(id):
			# A TZ path outside of the zoneinfo directory.
			from . import tzif
			try:
				z = tzif.load(id, id)
			except (OSError, ValueError) as err:
				log.warning("default zone %r could not be read: %s", id, err)
				z = None
			if z is not None:
				return z
		else:
			try:
				return self.zone(id)
			except errors.Error:
				pass

			# POSIX TZ strings are permitted by the environment.
			from . import posix
			try:
				return posix.parse(id)
			except errors.Error:
				pass

		log.warning("default zone %r is unknown; using UTC", id)
		return zones.UTC

	def zone(self, id):
		"""
		# Resolve &id using this environment's provider.
		"""
		if id is None:
			return self.default_zone()
		if id == 'UTC':
			return zones.UTC

		z = self.provider().zone(id)
		if z is not None:
			return z

		if id[:1] in ('+', '-'):
			return zones.for_offset_millis(zones.parse_offset(id))

		raise errors.InvalidConfiguration("The datetime zone id '%s' is not recognised" % (id,))

	def default_zone(self):
		return self._resolve('zone', self._load_default_zone)

	def set_default_zone(self, zone):
		"""
		# Replace the default zone; &None restores the configured one.
		"""
		if zone is None:
			zone = self._load_default_zone()
		self.slots['zone'] = zone
		log.info("default zone set to %s", zone.id)

	# Clock

	@staticmethod
	def system_millis(time_ns=time.time_ns):
		return time_ns() // 1000000

	def current_millis(self):
		return self.clock()

	def set_fixed_millis(self, millis):
		"""
		# Stop the clock at &millis.
		"""
		self.clock = (lambda: millis)

	def set_offset_millis(self, offset):
		"""
		# Offset the system clock by &offset milliseconds.
		"""
		system = self.system_millis
		if offset == 0:
			self.clock = system
		else:
			self.clock = (lambda: system() + offset)

	def set_system_millis(self):
		self.clock = self.system_millis

environment = Environment()

def provider():
	return environment.provider()

def names():
	return environment.names()

def default_zone():
	return environment.default_zone()

def current_millis():
	return environment.current_millis()

set_provider = environment.set_provider
set_names = environment.set_names
set_default_zone = environment.set_default_zone
set_fixed_millis = environment.set_fixed_millis
set_offset_millis = environment.set_offset_millis
set_system_millis = environment.set_system_millis
reset = environment.reset
