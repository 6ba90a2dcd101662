#!/usr/bin/env python3
"""
render-pipeline - 마크업 -> 스타일 -> 레이아웃 -> 페인트 파이프라인
사용법: python main.py <HTML 파일> [--png out.png]
예시: python main.py examples/page.html --width 600
"""
import sys

from render_pipeline.cli import main


if __name__ == "__main__":
    sys.exit(main())
