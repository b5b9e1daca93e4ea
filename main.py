import argparse
import logging

from BodyPositions import BodyPositions
from ConstellationLoader import ConstellationLoader
from Geolocator import Geolocator
from SkyConfig import SkyConfig
from StarMap import StarMap


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="real-time sky map of the bodies above a location")
    where = p.add_mutually_exclusive_group()
    where.add_argument('--city', help='city name to geocode, e.g. "Berlin, Germany"')
    where.add_argument('--lat', type=float, help='observer latitude in degrees')
    p.add_argument('--lon', type=float, help='observer longitude in degrees (with --lat)')
    p.add_argument('--elevation', type=float, default=0, help='observer elevation in metres')
    p.add_argument('--date', help='YYYY-MM-DD, defaults to today (utc)')
    p.add_argument('--time', default='00:00:00', help='HH:MM:SS')
    p.add_argument('--constellations', help='path or url of the constellation lines json')
    p.add_argument('--width', type=int, default=1280)
    p.add_argument('--height', type=int, default=800)
    p.add_argument('-v', '--verbose', action='store_true')
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = SkyConfig()

    geolocator = Geolocator(fallback=config.fallback_location)
    latitude, longitude = geolocator.locate(city=args.city, latitude=args.lat, longitude=args.lon)

    sky = StarMap(width=args.width, height=args.height, hit_radius=config.hit_radius)
    sky.load_constellations(ConstellationLoader(args.constellations or config.constellations))

    source = BodyPositions(config.app_id, config.app_secret)
    sky.load_bodies(source, latitude, longitude,
                    elevation=args.elevation, date=args.date, time=args.time)
    sky.show()


if __name__ == '__main__':
    main()
