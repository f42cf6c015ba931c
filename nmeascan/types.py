"""Record types for decoded NMEA sentences.

This module defines frozen dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Defaults instead of None: every field of a decoded record is always
       set. An empty NMEA field (consecutive commas) produces the documented
       default of its type: 0 for numbers, ' ' for characters, -1 for
       locations, and Time/Date with every component set to -1.

    2. Fixed-point locations: latitude and longitude are integers holding
       decimal degrees scaled by 10^7, with the hemisphere kept as a separate
       +1/-1 multiplier. This avoids float drift and gives bit-exact results.
       The ``latitude_degrees`` / ``longitude_degrees`` properties combine
       both into a signed float for convenience.

    3. Separate valid flag: ``valid`` indicates navigation validity, NOT parse
       validity. A decoded sentence may still report "no fix".
"""

from dataclasses import dataclass

LOCATION_SCALE = 10_000_000

# GSA reports up to 12 satellite IDs, GSV up to 4 satellites per sentence.
GSA_SATELLITE_SLOTS = 12
GSV_SATELLITE_SLOTS = 4


def to_decimal_degrees(location: int, direction: int) -> float | None:
    """Combine a scaled location and its hemisphere into signed decimal degrees.

    Args:
        location: Degrees scaled by 10^7, -1 if the field was empty
        direction: +1 for N/E, -1 for S/W, 0 if the field was empty

    Returns:
        Decimal degrees (positive for N/E, negative for S/W),
        or None if either field was empty

    Example:
        >>> to_decimal_degrees(472852332, 1)
        47.2852332
        >>> to_decimal_degrees(85652650, -1)
        -8.565265
    """
    if location == -1 or direction == 0:
        return None
    return direction * location / LOCATION_SCALE


@dataclass(frozen=True)
class Time:
    """UTC time of day. Every component is -1 when the field was empty."""

    hour: int = -1
    minute: int = -1
    second: int = -1


@dataclass(frozen=True)
class Date:
    """Calendar date. Every component is -1 when the field was empty."""

    year: int = -1
    month: int = -1
    day: int = -1


@dataclass(frozen=True)
class SatelliteInfo:
    """One satellite entry of a GSV sentence.

    Attributes:
        number: Satellite ID (PRN).
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees, true north (0-359).
        snr: Signal strength C/N0 in dBHz, 0 when not tracked.
    """

    number: int
    elevation: int
    azimuth: int
    snr: int


@dataclass(frozen=True)
class GBSData:
    """Parsed GBS (GNSS satellite fault detection) sentence.

    Attributes:
        time: UTC time the statistics refer to.
        error_latitude_meters: Expected error in latitude.
        error_longitude_meters: Expected error in longitude.
        error_altitude_meters: Expected error in altitude.
        failed_satellite_id: ID of the most likely failed satellite, 0 if none.
        miss_probability: Probability of missed detection, 0 if unsupported.
        bias_meters: Estimated bias of the most likely failed satellite.
        bias_stddev_meters: Standard deviation of the estimated bias.
    """

    time: Time
    error_latitude_meters: float
    error_longitude_meters: float
    error_altitude_meters: float
    failed_satellite_id: int
    miss_probability: float
    bias_meters: float
    bias_stddev_meters: float


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        time: UTC time of the position fix.

        latitude: Latitude in degrees scaled by 10^7, unsigned.
            -1 if the field was empty.

        latitude_direction: +1 for North, -1 for South, 0 if empty.

        longitude: Longitude in degrees scaled by 10^7, unsigned.
            -1 if the field was empty.

        longitude_direction: +1 for East, -1 for West, 0 if empty.

        quality: GPS fix quality indicator:
            0 = Invalid (no fix)
            1 = GPS fix (SPS - Standard Positioning Service)
            2 = DGPS fix (Differential GPS)
            4 = RTK Fixed (centimeter-level accuracy)
            5 = RTK Float (decimeter-level accuracy, converging)
            6 = Dead reckoning mode

        satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better.

        altitude_meters: Altitude above mean sea level (MSL) in meters.

        geoid_separation_meters: Height of geoid (MSL) above WGS84 ellipsoid.

    Example:
        >>> gga = decode("$GNGGA,092725.00,4717.11399,N,00833.91590,E,1,08,1.01,499.6,M,48.0,M,,*5B")
        >>> gga.latitude
        472852332
        >>> gga.latitude_degrees
        47.2852332
        >>> gga.valid
        True
    """

    time: Time
    latitude: int
    latitude_direction: int
    longitude: int
    longitude_direction: int
    quality: int
    satellites: int
    horizontal_dilution_of_precision: float
    altitude_meters: float
    geoid_separation_meters: float

    @property
    def latitude_degrees(self) -> float | None:
        return to_decimal_degrees(self.latitude, self.latitude_direction)

    @property
    def longitude_degrees(self) -> float | None:
        return to_decimal_degrees(self.longitude, self.longitude_direction)

    @property
    def valid(self) -> bool:
        """Navigation validity: only valid if the receiver has a fix."""
        return self.quality > 0


@dataclass(frozen=True)
class GLLData:
    """Parsed GLL (Latitude and longitude, with time of position fix) sentence.

    Attributes:
        latitude: Latitude in degrees scaled by 10^7, -1 if empty.
        latitude_direction: +1 for North, -1 for South, 0 if empty.
        longitude: Longitude in degrees scaled by 10^7, -1 if empty.
        longitude_direction: +1 for East, -1 for West, 0 if empty.
        time: UTC time of the position fix.
        status: 'A' = data valid, 'V' = data invalid.
        position_mode: FAA mode indicator (A/D/E/N), ' ' if absent.
    """

    latitude: int
    latitude_direction: int
    longitude: int
    longitude_direction: int
    time: Time
    status: str
    position_mode: str

    @property
    def latitude_degrees(self) -> float | None:
        return to_decimal_degrees(self.latitude, self.latitude_direction)

    @property
    def longitude_degrees(self) -> float | None:
        return to_decimal_degrees(self.longitude, self.longitude_direction)

    @property
    def valid(self) -> bool:
        return self.status == "A"


@dataclass(frozen=True)
class GSAData:
    """Parsed GSA (GNSS DOP and active satellites) sentence.

    Attributes:
        operation_mode: 'M' = manually set 2D/3D, 'A' = automatic.
        navigation_mode: 1 = no fix, 2 = 2D fix, 3 = 3D fix.
        satellite_ids: IDs of the satellites used, 0 for unused slots.
            Always GSA_SATELLITE_SLOTS entries.
        position_dilution_of_precision: PDOP.
        horizontal_dilution_of_precision: HDOP.
        vertical_dilution_of_precision: VDOP.
        system_id: GNSS system ID (NMEA 4.10+), 0 if absent.
    """

    operation_mode: str
    navigation_mode: int
    satellite_ids: tuple[int, ...]
    position_dilution_of_precision: float
    horizontal_dilution_of_precision: float
    vertical_dilution_of_precision: float
    system_id: int


@dataclass(frozen=True)
class GSTData:
    """Parsed GST (GNSS pseudorange error statistics) sentence."""

    time: Time
    range_rms: float
    std_major_meters: float
    std_minor_meters: float
    orientation_degrees: float
    std_latitude_meters: float
    std_longitude_meters: float
    std_altitude_meters: float


@dataclass(frozen=True)
class GSVData:
    """Parsed GSV (GNSS satellites in view) sentence.

    A full satellite list spans several GSV sentences; this record holds the
    satellites of a single sentence only.

    Attributes:
        message_count: Number of GSV sentences in this group.
        message_number: Index of this sentence in the group (1-based).
        satellites_in_view: Total number of satellites in view.
        satellites: GSV_SATELLITE_SLOTS entries; slots not present in the
            sentence hold all-zero SatelliteInfo.
    """

    message_count: int
    message_number: int
    satellites_in_view: int
    satellites: tuple[SatelliteInfo, ...]


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended minimum data) sentence.

    Attributes:
        time: UTC time of the position fix.
        status: 'A' = data valid, 'V' = data invalid.
        latitude: Latitude in degrees scaled by 10^7, -1 if empty.
        latitude_direction: +1 for North, -1 for South, 0 if empty.
        longitude: Longitude in degrees scaled by 10^7, -1 if empty.
        longitude_direction: +1 for East, -1 for West, 0 if empty.
        speed_knots: Speed over ground.
        course_degrees: Course over ground, true north.
        date: UTC date of the position fix.
        magnetic_variation_degrees: Magnetic variation, 0 if unsupported.
        position_mode: FAA mode indicator (A/D/E/F/M/N/R), ' ' if absent.
        navigation_status: 'V' (NMEA 4.10+), ' ' if absent.
    """

    time: Time
    status: str
    latitude: int
    latitude_direction: int
    longitude: int
    longitude_direction: int
    speed_knots: float
    course_degrees: float
    date: Date
    magnetic_variation_degrees: float
    position_mode: str
    navigation_status: str

    @property
    def latitude_degrees(self) -> float | None:
        return to_decimal_degrees(self.latitude, self.latitude_direction)

    @property
    def longitude_degrees(self) -> float | None:
        return to_decimal_degrees(self.longitude, self.longitude_direction)

    @property
    def valid(self) -> bool:
        return self.status == "A"


@dataclass(frozen=True)
class VTGData:
    """Parsed VTG (Course over ground and ground speed) sentence.

    Attributes:
        course_true_degrees: Course over ground relative to true north.
            0.0 when stationary (no heading without movement).
        course_magnetic_degrees: Course over ground relative to magnetic north.
        speed_knots: Speed over ground in knots.
        speed_kilometers_per_hour: Speed over ground in km/h.
        position_mode: FAA mode indicator (NMEA 2.3+):
            'A' = Autonomous (standard GPS positioning)
            'D' = Differential (DGPS or RTK - higher accuracy)
            'E' = Estimated (dead reckoning - no satellite fix)
            'N' = Not valid (no fix)
            ' ' if the field was missing (older receivers).
    """

    course_true_degrees: float
    course_magnetic_degrees: float
    speed_knots: float
    speed_kilometers_per_hour: float
    position_mode: str

    @property
    def speed_meters_per_second(self) -> float:
        """Ground speed in m/s (1 km/h = 1/3.6 m/s)."""
        return self.speed_kilometers_per_hour / 3.6

    @property
    def valid(self) -> bool:
        """Navigation validity: mode must exist and not be 'N' (not valid)."""
        return self.position_mode not in (" ", "N")


@dataclass(frozen=True)
class ZDAData:
    """Parsed ZDA (Time and date) sentence."""

    time: Time
    day: int
    month: int
    year: int
    local_hour_offset: int
    local_minute_offset: int

    @property
    def date(self) -> Date:
        return Date(year=self.year, month=self.month, day=self.day)
