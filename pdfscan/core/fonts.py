"""
폰트 메타데이터 추출

폰트 딕셔너리 한 줄에서 세 가지를 모은다:
1. /F1 5 0 R       → 리소스 이름 F1은 객체 (5, 0)
2. /ToUnicode 6 0 R → 이 폰트 객체는 CMap 스트림 (6, 0)을 사용
3. RKSJ            → 이 폰트 객체는 Shift-JIS 인코딩
"""

import logging

from . import patterns
from .models import IndirectRef, ObjectOutcome, ScanContext

logger = logging.getLogger(__name__)


def extract_font_metadata(ctx: ScanContext, ref: IndirectRef, dictionary: str) -> ObjectOutcome:
    """폰트 딕셔너리를 읽어 ctx의 폰트 테이블에 등록"""
    for name, font_ref in patterns.iter_font_resources(dictionary):
        ctx.register_font_resource(name, font_ref)

    cmap_ref = patterns.find_to_unicode(dictionary)
    if cmap_ref is not None:
        ctx.register_to_unicode(ref, cmap_ref)

    if patterns.is_shift_jis(dictionary):
        ctx.shift_jis_fonts.add(ref)

    logger.debug("font dictionary %r: %d resources known", ref, len(ctx.font_resources))
    return ObjectOutcome.processed(ref)
