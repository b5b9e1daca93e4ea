import logging

import matplotlib.pyplot as plt

from HitTester import DEFAULT_HIT_RADIUS, find_nearest
from SceneStore import SceneStore
from SkyErrors import DataUnavailable
from SkyRenderer import SkyRenderer

logger = logging.getLogger(__name__)


class StarMap:
    def __init__(self, width=1280, height=800, hit_radius=DEFAULT_HIT_RADIUS, dpi=100):
        self.width = width
        self.height = height
        self.hit_radius = hit_radius
        self.scene = SceneStore()
        self.bodies = []
        self._latest_request = 0

        self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi, facecolor='#000000')
        self.ax = self.fig.add_axes([0, 0, 1, 1], facecolor='#000000')
        self.renderer = SkyRenderer(self.ax)

        self.info = self.fig.text(0.01, 0.98, '', color='white', fontsize=11,
                                  ha='left', va='top', visible=False,
                                  bbox=dict(facecolor='#000814', edgecolor='white', alpha=0.7))

        self.fig.canvas.mpl_connect('button_press_event', self._on_click)
        self.fig.canvas.mpl_connect('resize_event', self._on_resize)

    @property
    def viewport(self):
        return self.width, self.height

    def begin_request(self):
        self._latest_request += 1
        return self._latest_request

    def apply_bodies(self, request_id, bodies):
        # only the latest issued request may touch the scene
        if request_id != self._latest_request:
            logger.debug(f"discarding stale body data (request {request_id}, latest {self._latest_request})")
            return False

        self.bodies = list(bodies)
        self.scene.replace_bodies(self.bodies, self.width, self.height)
        self.redraw()
        return True

    def load_bodies(self, source, latitude, longitude, **query):
        request_id = self.begin_request()
        try:
            bodies = source.fetch(latitude, longitude, **query)
        except DataUnavailable as err:
            logger.warning(f"body data not loaded: {err}")
            return False
        return self.apply_bodies(request_id, bodies)

    def set_edges(self, edges):
        self.scene.replace_edges(edges)
        self.redraw()

    def load_constellations(self, loader):
        try:
            edges = loader.load()
        except DataUnavailable as err:
            logger.warning(f"constellation data not loaded: {err}")
            edges = []
        self.set_edges(edges)

    def resize(self, width, height):
        self.width = width
        self.height = height
        # re-project the last received bodies against the new viewport
        self.scene.replace_bodies(self.bodies, width, height)
        self.redraw()

    def identify(self, x, y):
        point = find_nearest(x, y, self.scene.current_points(), self.hit_radius)
        if point is None:
            self.info.set_visible(False)
        else:
            self.info.set_text(f"⭐ {point.name}")
            self.info.set_visible(True)
        self.fig.canvas.draw_idle()
        return point

    def redraw(self):
        return self.renderer.draw(self.scene, self.width, self.height)

    def _on_click(self, event):
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            return
        point = self.identify(event.xdata, event.ydata)
        if point is not None:
            logger.info(f"selected {point.name}")

    def _on_resize(self, event):
        if (event.width, event.height) == self.viewport:
            return
        self.resize(event.width, event.height)

    def show(self):
        self.redraw()
        plt.show()
