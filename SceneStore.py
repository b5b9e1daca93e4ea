from typing import NamedTuple, Optional

import pandas as pd

from Projection import DEFAULT_MAGNITUDE, project, star_radius


class CelestialBody(NamedTuple):
    id: str
    ra_hours: float
    dec: float
    name: str
    magnitude: Optional[float] = None


class ProjectedPoint(NamedTuple):
    id: str
    x: float
    y: float
    radius: float
    name: str


def body_id(value):
    # 0, "0" and 0.0 name the same body
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


POINT_COLUMNS = ['x', 'y', 'radius', 'name']


def _empty_points():
    return pd.DataFrame(columns=POINT_COLUMNS, index=pd.Index([], name='id', dtype=str))


class SceneStore:
    """Current projected bodies and constellation edges.

    Both collections are swapped wholesale, never edited in place, so readers
    only ever see a complete set.
    """

    def __init__(self):
        self._points = _empty_points()
        self._edges = []

    def replace_bodies(self, bodies, width, height):
        table = pd.DataFrame(list(bodies), columns=list(CelestialBody._fields))

        if table.empty:
            self._points = _empty_points()
            return

        ra = table['ra_hours'].astype(float).to_numpy()
        dec = table['dec'].astype(float).to_numpy()
        x, y = project(ra, dec, width, height)

        # no magnitude from the source -> placeholder, only used for sizing
        magnitude = pd.to_numeric(table['magnitude'], errors='coerce').fillna(DEFAULT_MAGNITUDE)

        self._points = pd.DataFrame(
            {
                'x': x,
                'y': y,
                'radius': star_radius(magnitude.to_numpy(dtype=float)),
                'name': table['name'].to_numpy(),
            },
            index=pd.Index(table['id'].map(body_id), name='id'),
        )

    def replace_edges(self, edges):
        self._edges = [(body_id(i), body_id(j)) for i, j in edges]

    def current_points(self):
        return [
            ProjectedPoint(str(row.Index), float(row.x), float(row.y), float(row.radius), row.name)
            for row in self._points.itertuples()
        ]

    def current_edges(self):
        return list(self._edges)

    def edge_segments(self):
        # endpoints for every edge whose ids both exist, first occurrence wins on dup ids
        points = self._points[~self._points.index.duplicated(keep='first')]
        known = set(points.index)

        segments = []
        for i, j in self._edges:
            if i not in known or j not in known:
                continue
            start = points.loc[i]
            end = points.loc[j]
            segments.append(((float(start['x']), float(start['y'])),
                             (float(end['x']), float(end['y']))))
        return segments

    def __len__(self):
        return len(self._points)
