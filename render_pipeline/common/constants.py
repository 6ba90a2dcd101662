"""파이프라인 전역 상수"""

# 기본 뷰포트 크기
WIDTH, HEIGHT = 800, 600

# 문서 여백
HSTEP, VSTEP = 13, 18

# <input>, <button> 고정 크기
INPUT_WIDTH_PX = 200
INPUT_PADDING_PX = 4

# em, % 길이의 기준 크기
BASE_FONT_SIZE_PX = 16

# line box 높이 = 1.25 * (ascent + descent)
LINE_HEIGHT_FACTOR = 1.25
