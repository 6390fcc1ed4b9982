import argparse
import sys

from packdp.exceptions import PackerError
from packdp.workflows import pack_and_return_pool


def create_parser():
    parser = argparse.ArgumentParser(
        prog="packdp",
        description="Select the most valuable items that fit in each package",
    )
    parser.add_argument("filename", help="Text file with one instance per line")
    parser.add_argument(
        "--fill", action="store", default="lazy", choices=["lazy", "table"]
    )
    parser.add_argument("-l", "--loglevel", action="store", default="WARNING")
    parser.add_argument(
        "--json", action="store", default=None, help="Write the selections to a JSON file"
    )
    return parser


def main(argv=None):
    args = create_parser().parse_args(argv)  # parse sys.argv

    try:
        results = pack_and_return_pool(
            args.filename, fill=args.fill, loglevel=args.loglevel
        )
    except PackerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(results.solutions.render())
    if args.json:
        results.solutions.write(args.json, indent=4)
    return 0


if __name__ == "__main__":
    sys.exit(main())
