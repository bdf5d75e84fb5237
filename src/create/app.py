"""
단축 URL 생성 람다
POST /shorten {"url": ...} -> 원자적 카운터 ID를 radix62로 인코딩해 shortCode 발급
"""

import json
import os
import sys
from datetime import datetime, timezone

import boto3
from botocore.exceptions import ClientError

# --- 공통 모듈 설정 ---
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from radix62 import OutOfRangeError, encode, parse_base

# --- 리소스 초기화 ---
_DYNAMO = boto3.resource(
    "dynamodb", region_name=os.environ.get("AWS_REGION", "ap-northeast-2")
)
_COUNTER_KEY = "url_id"


def _get_table(env_name: str):
    """환경변수로부터 테이블 객체 로드. 없으면 None"""
    table_name = os.environ.get(env_name, "").strip()
    if not table_name:
        print(f"Config Error: Environment variable {env_name} is missing")
        return None
    return _DYNAMO.Table(table_name)


def _get_next_id(table) -> int:
    """DynamoDB 원자적 카운터로 순차 ID 발급"""
    resp = table.update_item(
        Key={"counter_name": _COUNTER_KEY},
        UpdateExpression="SET #seq = if_not_exists(#seq, :zero) + :inc",
        ExpressionAttributeNames={"#seq": "seq"},
        ExpressionAttributeValues={":zero": 0, ":inc": 1},
        ReturnValues="UPDATED_NEW",
    )
    return int(resp["Attributes"]["seq"])


def _save_mapping(table, short_code: str, original_url: str) -> None:
    table.put_item(
        Item={
            "shortCode": short_code,
            "original_url": original_url,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
    )


def _short_url(event: dict, short_code: str) -> str | None:
    host = (event.get("headers") or {}).get("Host")
    if not host:
        return None
    stage = (event.get("requestContext") or {}).get("stage", "Prod")
    return f"https://{host}/{stage}/{short_code}"


def handler(event, context):
    try:
        try:
            body = json.loads(event.get("body") or "{}")
        except json.JSONDecodeError:
            return _response(400, {"error": "body must be valid JSON"})
        if not isinstance(body, dict):
            return _response(400, {"error": "body must be a JSON object"})

        original_url = body.get("url") or ""
        if not isinstance(original_url, str):
            return _response(400, {"error": "url 필드는 문자열이어야 합니다."})
        original_url = original_url.strip()
        if not original_url:
            return _response(400, {"error": "url 필드가 필요합니다."})

        # 카운터 증가 전에 진법 설정부터 검증
        try:
            base = parse_base(os.environ.get("SHORT_CODE_BASE"))
        except OutOfRangeError as e:
            print(f"Config Error: {e}")
            return _response(500, {"error": "Server configuration error (SHORT_CODE_BASE)"})

        counter_table = _get_table("COUNTER_TABLE_NAME")
        mapping_table = _get_table("TABLE_NAME")
        if counter_table is None or mapping_table is None:
            return _response(500, {"error": "Server configuration error (table name)"})

        # 1. ID 생성 및 코드 변환
        short_id = _get_next_id(counter_table)
        short_code = encode(short_id, base)

        # 2. DB 저장
        _save_mapping(mapping_table, short_code, original_url)

        return _response(201, {
            "shortCode": short_code,
            "shortUrl": _short_url(event, short_code),
            "originalUrl": original_url,
        })

    except ClientError as e:
        print(f"AWS Error: {e.response['Error']['Message']}")
        return _response(500, {"error": "Internal Database Error"})
    except Exception as e:
        print(f"Unexpected Error: {str(e)}")
        return _response(500, {"error": "Internal Server Error"})


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*"
        },
        "body": json.dumps(body, ensure_ascii=False),
    }
