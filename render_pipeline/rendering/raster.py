"""display list를 skia surface에 래스터화

레이아웃 정보 없이 그리기 명령만 실행합니다.
"""
import logging

import skia

from ..profiling import MeasureTime

logger = logging.getLogger(__name__)


def raster(display_list, width, height, scroll=0):
    """그리기 명령을 흰 배경 surface에 실행하고 이미지를 반환"""
    with MeasureTime("raster", "raster"):
        surface = skia.Surface(int(width), int(height))
        canvas = surface.getCanvas()
        canvas.clear(skia.ColorWHITE)
        for cmd in display_list:
            if cmd.rect.top > scroll + height: continue
            if cmd.rect.bottom < scroll: continue
            cmd.execute(scroll, canvas)
        return surface.makeImageSnapshot()


def save_png(display_list, width, height, path):
    image = raster(display_list, width, height)
    image.save(path, skia.kPNG)
    logger.info("Wrote %dx%d image to %s", width, height, path)
