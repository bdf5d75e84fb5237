#!/usr/bin/env python3
"""
로컬 URL 단축 확인용 스크립트 (AWS 없이 SQLite + Python만 사용)

사용법:
  python3 scripts/local_run.py create "https://긴주소.com"
  python3 scripts/local_run.py get <short_code>
  python3 scripts/local_run.py --base 16 encode 255
  python3 scripts/local_run.py decode 3d7
"""

import argparse
import os
import sqlite3
import sys
from typing import Optional

# 프로젝트 루트의 src 폴더를 경로에 추가 (radix62 임포트용)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from radix62 import (
    DEFAULT_BASE,
    MAX_BASE,
    MIN_BASE,
    Radix62Error,
    decode,
    decode_magnitude,
    encode,
)

# SQLite DB 파일 기본 위치 (프로젝트 루트에 생성됨)
DB_PATH = os.path.join(_PROJECT_ROOT, "local_links.db")


def get_connection(db_path: str = DB_PATH):
    return sqlite3.connect(db_path)


def init_db(conn):
    """처음 실행 시 테이블 생성"""
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS links (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            original_url TEXT NOT NULL
        )
        """
    )
    conn.commit()


def create_short_url(url: str, base: int = DEFAULT_BASE, db_path: str = DB_PATH) -> str:
    """
    URL을 DB에 저장하고 짧은 코드(short_code)를 만들어 반환합니다.
    """
    url = (url or "").strip()
    if not url:
        raise ValueError("URL을 입력해 주세요.")

    conn = get_connection(db_path)
    try:
        init_db(conn)
        cursor = conn.execute("INSERT INTO links (original_url) VALUES (?)", (url,))
        conn.commit()
        row_id = cursor.lastrowid
        short_code = encode(row_id, base)
        print(f"  [radix{base} 인코딩] DB ID {row_id} → short_code \"{short_code}\"")
        return short_code
    finally:
        conn.close()


def get_original_url(
    short_code: str, base: int = DEFAULT_BASE, db_path: str = DB_PATH
) -> Optional[str]:
    """
    short_code로 DB를 조회해 원본 URL을 반환합니다.
    없거나 형식이 잘못된 코드면 None을 반환합니다.
    """
    short_code = (short_code or "").strip()
    if not short_code:
        return None

    try:
        row_id = decode(short_code, base)
        print(f"  [radix{base} 디코딩] short_code \"{short_code}\" → DB ID {row_id}")
    except ValueError as e:
        print(f"  {e}", file=sys.stderr)
        return None

    conn = get_connection(db_path)
    try:
        init_db(conn)
        row = conn.execute(
            "SELECT original_url FROM links WHERE id = ?", (row_id,)
        ).fetchone()
        return row[0] if row else None
    except OverflowError:
        # SQLite INTEGER 범위(64비트)를 넘는 ID는 존재할 수 없음
        return None
    finally:
        conn.close()


def _base_arg(value: str) -> int:
    try:
        base = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"정수가 아닙니다: {value!r}") from None
    if not MIN_BASE <= base <= MAX_BASE:
        raise argparse.ArgumentTypeError(f"진법은 {MIN_BASE}~{MAX_BASE} 사이여야 합니다: {base}")
    return base


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="로컬 URL 단축: create(저장) / get(조회) / encode / decode"
    )
    parser.add_argument(
        "--base", type=_base_arg, default=DEFAULT_BASE, help="진법 (2~62, 기본 62)"
    )
    parser.add_argument("--db", default=DB_PATH, help="SQLite DB 파일 경로")
    sub = parser.add_subparsers(dest="command", required=True)

    p_create = sub.add_parser("create", help="URL을 저장하고 short_code를 받습니다")
    p_create.add_argument("url", help="단축할 원본 URL (따옴표로 감싸서 입력)")

    p_get = sub.add_parser("get", help="short_code로 원본 URL을 조회합니다")
    p_get.add_argument("short_code", help="단축 코드 (예: 1, 2, 1Z)")

    p_encode = sub.add_parser("encode", help="정수를 코드로 변환합니다")
    p_encode.add_argument("value", type=int, help="0 이상의 정수")

    p_decode = sub.add_parser("decode", help="코드를 정수로 변환합니다")
    p_decode.add_argument("code", help="변환할 코드")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "create":
        try:
            code = create_short_url(args.url, args.base, args.db)
        except ValueError as e:
            print(f"오류: {e}", file=sys.stderr)
            return 1
        print(f"short_code: {code}")

    elif args.command == "get":
        url = get_original_url(args.short_code, args.base, args.db)
        if url is None:
            print("찾을 수 없습니다.", file=sys.stderr)
            return 1
        print(url)

    elif args.command == "encode":
        try:
            print(encode(args.value, args.base))
        except Radix62Error as e:
            print(f"오류: {e}", file=sys.stderr)
            return 1

    elif args.command == "decode":
        try:
            magnitude = decode_magnitude(args.code, args.base)
        except Radix62Error as e:
            print(f"오류: {e}", file=sys.stderr)
            return 1
        print(f"{magnitude.value} ({magnitude.precision.value})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
