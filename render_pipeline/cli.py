"""
render-pipeline 명령줄 도구

로컬 HTML 파일을 Frame에 로드하고 display list를 JSON 줄로 출력합니다.
사용법: render-pipeline page.html --width 800 --png out.png
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from .common.constants import WIDTH, HEIGHT
from .content import Frame
from .profiling import Tracer


def setup_logging(verbose=False):
    """Set up logging for the command line tool."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    logger.debug("Logging initialized at level %s", logging.getLevelName(log_level))
    return logger


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a local HTML page to a paint command list")
    parser.add_argument('page', help='HTML file to render')
    parser.add_argument('--width', type=int, default=WIDTH, help='Viewport width in px')
    parser.add_argument('--height', type=int, default=HEIGHT, help='Raster height in px')
    parser.add_argument('--css', type=str, default=None, help='Author stylesheet file')
    parser.add_argument('--user-css', type=str, default=None, help='User stylesheet file')
    parser.add_argument('--base-url', type=str, default=None,
                        help='Base URL for links and forms (default: file URL of PAGE)')
    parser.add_argument('--png', type=str, default=None, help='Rasterize to this PNG file')
    parser.add_argument('--trace', type=str, default=None,
                        help='Write a Chrome trace JSON to this file')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def read_optional(path):
    return Path(path).read_text(encoding="utf-8") if path else ""


def main(argv=None):
    args = parse_arguments(argv)
    logger = setup_logging(args.verbose)

    if args.trace:
        Tracer.get().start(args.trace)

    page = Path(args.page)
    try:
        html = page.read_text(encoding="utf-8")
        author_css = read_optional(args.css)
        user_css = read_optional(args.user_css)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1

    base_url = args.base_url or page.resolve().as_uri()
    frame = Frame(width=args.width, user_css=user_css)
    frame.load(html, base_url=base_url, author_css=author_css)

    for diagnostic in frame.diagnostics:
        logger.debug("%s", diagnostic)
    for url in frame.external_scripts:
        logger.info("Skipping external script %s", url)

    for cmd in frame.display_list:
        print(json.dumps(cmd.to_dict()))

    if args.png:
        from .rendering.raster import save_png
        save_png(frame.display_list, args.width, args.height, args.png)

    # 타이머 Task는 실행하지 않음
    frame.js_context.discard()

    if args.trace:
        Tracer.get().finish()
    return 0


if __name__ == "__main__":
    sys.exit(main())
