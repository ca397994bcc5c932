"""MaxMind GeoIP lookups for the visitor's country."""

import threading
from typing import Optional

import geoip2.database
from geoip2.errors import AddressNotFoundError
from maxminddb import InvalidDatabaseError

from infrastructure.logging import get_module_logger

logger = get_module_logger()


class CountryLookup:
    """Maps client IP addresses to ISO 3166-1 alpha-2 country codes.

    The database is opened on first use and the reader is kept for the
    lifetime of the object, so one instance should be shared per process.
    Lookups never raise: any failure yields None.

    Usage:
        lookup = CountryLookup("./geodb/GeoLite2-City.mmdb")
        lookup("192.0.2.1")  # "FR"
    """

    def __init__(self, db_path: str):
        """Initialize country lookup.

        Args:
            db_path: Path to a GeoLite2 City or Country database.
        """
        self.db_path = db_path
        self._reader: Optional[geoip2.database.Reader] = None
        self._lock = threading.Lock()

    @property
    def reader(self) -> Optional[geoip2.database.Reader]:
        """The shared database reader, or None if it cannot be opened."""
        if self._reader is None:
            with self._lock:
                if self._reader is None:
                    try:
                        self._reader = geoip2.database.Reader(self.db_path)
                    except (OSError, InvalidDatabaseError, ValueError) as e:
                        logger.warning(
                            "geoip_database_unavailable", db_path=self.db_path, error=str(e)
                        )
                        return None
                    logger.info("geoip_database_opened", db_path=self.db_path)
        return self._reader

    def __call__(self, ip: Optional[str]) -> Optional[str]:
        """Return the uppercase country code for an IP address, or None."""
        if not ip:
            return None
        reader = self.reader
        if reader is None:
            return None
        try:
            # country() works on both City and Country databases
            response = reader.country(ip)
        except AddressNotFoundError:
            logger.debug("geoip_address_not_found", ip=ip)
            return None
        except ValueError:
            logger.debug("geoip_invalid_address", ip=ip)
            return None
        except (TypeError, InvalidDatabaseError, OSError) as e:
            logger.warning("geoip_lookup_failed", db_path=self.db_path, error=str(e))
            return None
        return response.country.iso_code

    def close(self) -> None:
        """Close the database reader."""
        with self._lock:
            if self._reader is not None:
                self._reader.close()
                self._reader = None
