"""
pdfscan CLI

사용법:
    pdfscan document.pdf
    pdfscan document.pdf --joined
    pdfscan document.pdf --json
    pdfscan document.pdf --debug
"""

import sys
import argparse
import logging
from pathlib import Path


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='pdfscan',
        description='pdfscan - CID/Shift-JIS PDF 텍스트 추출',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
출력:
  기본          추출한 조각을 한 줄에 하나씩 출력
  --joined      모든 조각을 이어 붙여 한 번에 출력
  --json        JSON으로 출력

예시:
  pdfscan document.pdf
  pdfscan document.pdf --joined
  pdfscan document.pdf --debug 2> trace.log
'''
    )

    parser.add_argument('file', help='PDF 파일 경로')
    parser.add_argument('--joined', action='store_true', help='조각을 이어 붙여 출력')
    parser.add_argument('--json', '-j', action='store_true', help='JSON으로 출력')
    parser.add_argument('--debug', action='store_true', help='진단 메시지를 stderr로 출력')

    args = parser.parse_args(argv)

    filepath = Path(args.file)
    if not filepath.is_file():
        print(f"오류: 파일을 찾을 수 없습니다: {filepath}", file=sys.stderr)
        return

    from . import analyze, to_json

    if args.debug:
        # MessageSink는 모든 메시지를 pdfscan 로거에 DEBUG로 남긴다
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format='%(name)s: %(message)s')

    result = analyze(filepath)

    if args.json:
        print(to_json(result))
    elif args.joined:
        print(result.joined_text)
    else:
        for text in result.texts:
            print(text)


if __name__ == '__main__':
    main()
