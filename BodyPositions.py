import base64
import http.client
import json
import logging
import urllib.parse
import urllib.request
from datetime import datetime, timezone

from Projection import DEFAULT_MAGNITUDE
from SceneStore import CelestialBody, body_id
from SkyErrors import DataUnavailable

logger = logging.getLogger(__name__)


class BodyPositions:
    POSITIONS_URL = "https://api.astronomyapi.com/api/v2/bodies/positions"

    def __init__(self, app_id, app_secret, timeout=30):
        self.app_id = app_id
        self.app_secret = app_secret
        self.timeout = timeout

    def _auth_header(self):
        token = base64.b64encode(f"{self.app_id}:{self.app_secret}".encode()).decode()
        return f"Basic {token}"

    def build_url(self, latitude, longitude, elevation=0, date=None, time='00:00:00'):
        if date is None:
            date = datetime.now(timezone.utc).strftime('%Y-%m-%d')

        query = urllib.parse.urlencode({
            'latitude': latitude,
            'longitude': longitude,
            'elevation': elevation,
            'from_date': date,
            'to_date': date,
            'time': time,
        })
        return f"{self.POSITIONS_URL}?{query}"

    def _request_json(self, url):
        if not self.app_id or not self.app_secret:
            raise DataUnavailable("astronomy api credentials not configured")

        request = urllib.request.Request(url, headers={'Authorization': self._auth_header()})
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return json.loads(response.read().decode("utf-8"))
        except (OSError, http.client.HTTPException) as err:
            raise DataUnavailable(f"request to {self.POSITIONS_URL} failed: {err}") from err
        except ValueError as err:
            raise DataUnavailable(f"invalid json from {self.POSITIONS_URL}: {err}") from err

    @staticmethod
    def _equatorial(row):
        cells = row.get('cells') or []
        if cells and 'position' in cells[0]:
            return cells[0]['position']['equatorial']
        return row['entry']['position']['equatorial']

    @classmethod
    def parse(cls, data):
        try:
            rows = data['data']['table']['rows']
        except (KeyError, TypeError) as err:
            raise DataUnavailable(f"unexpected body position payload: missing {err}") from err

        # rows may come as a list or as an object keyed by index
        if isinstance(rows, dict):
            entries = rows.items()
        elif isinstance(rows, list):
            entries = enumerate(rows)
        else:
            raise DataUnavailable(f"unexpected body position rows: {type(rows).__name__}")

        bodies = []
        for i, row in entries:
            try:
                equatorial = cls._equatorial(row)
                bodies.append(CelestialBody(
                    id=body_id(i),
                    ra_hours=float(equatorial['rightAscension']['hours']),
                    dec=float(equatorial['declination']['degrees']),
                    name=row['entry']['name'],
                    # no magnitude from the api
                    magnitude=DEFAULT_MAGNITUDE,
                ))
            except (AttributeError, IndexError, KeyError, TypeError, ValueError) as err:
                raise DataUnavailable(f"malformed body row {i}: {err!r}") from err

        return bodies

    def fetch(self, latitude, longitude, elevation=0, date=None, time='00:00:00'):
        url = self.build_url(latitude, longitude, elevation, date, time)
        logger.info(f"fetching body positions for ({latitude:.4f}, {longitude:.4f})...")

        bodies = self.parse(self._request_json(url))
        logger.info(f"received {len(bodies)} bodies")
        return bodies
