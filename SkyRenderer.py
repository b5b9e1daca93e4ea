from matplotlib.patches import Circle


class SkyRenderer:
    STAR_COLOR = 'white'
    LINE_COLOR = (1.0, 1.0, 1.0, 0.3)
    BACKGROUND = '#000000'

    def __init__(self, ax):
        self.ax = ax

    def draw(self, scene, width, height):
        """Clear the axes and redraw every star and constellation line.

        Returns (stars_drawn, lines_drawn).
        """
        self.ax.clear()

        stars = self._draw_stars(scene.current_points())
        lines = self._draw_constellations(scene.edge_segments())

        self._configure_axes(width, height)
        self.ax.figure.canvas.draw_idle()

        return stars, lines

    def _draw_stars(self, points):
        for point in points:
            self.ax.add_patch(Circle((point.x, point.y), point.radius,
                                     facecolor=self.STAR_COLOR, edgecolor='none', zorder=3))
        return len(points)

    def _draw_constellations(self, segments):
        for (x0, y0), (x1, y1) in segments:
            self.ax.plot([x0, x1], [y0, y1], color=self.LINE_COLOR, lw=1, zorder=2)
        return len(segments)

    def _configure_axes(self, width, height):
        # axes in canvas pixels, origin top-left
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_facecolor(self.BACKGROUND)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        for spine in self.ax.spines.values():
            spine.set_visible(False)
