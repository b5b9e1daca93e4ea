import http.client
import json
import logging
import urllib.request
from pathlib import Path

from SceneStore import body_id
from SkyErrors import DataUnavailable

logger = logging.getLogger(__name__)


class ConstellationLoader:
    DEFAULT_SOURCE = "data/constellations.json"

    def __init__(self, source=DEFAULT_SOURCE, timeout=30):
        self.source = str(source)
        self.timeout = timeout

    def _is_remote(self):
        return self.source.startswith(('http://', 'https://'))

    def _read_json(self):
        if self._is_remote():
            logger.info(f"downloading {self.source}...")
            try:
                with urllib.request.urlopen(self.source, timeout=self.timeout) as response:
                    return json.loads(response.read().decode("utf-8"))
            except (OSError, http.client.HTTPException) as err:
                raise DataUnavailable(f"could not download {self.source}: {err}") from err
            except ValueError as err:
                raise DataUnavailable(f"invalid json in {self.source}: {err}") from err

        path = Path(self.source)
        logger.info(f"loading {path.name}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as err:
            raise DataUnavailable(f"could not read {path}: {err}") from err
        except ValueError as err:
            raise DataUnavailable(f"invalid json in {path}: {err}") from err

    @staticmethod
    def _pairs(entry):
        # [i, j] is one edge, longer entries are chains of consecutive ids
        return [(body_id(a), body_id(b)) for a, b in zip(entry, entry[1:])]

    def load_lines(self):
        data = self._read_json()

        try:
            lines = data['lines']
        except (KeyError, TypeError) as err:
            raise DataUnavailable(f"no 'lines' in {self.source}") from err
        if not isinstance(lines, list):
            raise DataUnavailable(f"'lines' in {self.source} is not a list")

        edges = []
        for entry in lines:
            if not isinstance(entry, (list, tuple)) or len(entry) < 2:
                logger.debug(f"skipping malformed constellation entry {entry!r}")
                continue
            edges.extend(self._pairs(entry))

        return edges

    def load(self):
        edges = self.load_lines()
        logger.info(f"loaded {len(edges)} constellation lines")
        return edges
