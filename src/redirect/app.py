import json
import os
import sys

import boto3
from botocore.exceptions import ClientError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from radix62 import OutOfRangeError, is_valid_code, parse_base

# 전역 리소스 초기화 (Cold Start 성능 최적화)
_DYNAMO = boto3.resource(
    "dynamodb", region_name=os.environ.get("AWS_REGION", "ap-northeast-2")
)


def _get_table(env_name: str):
    """환경변수로부터 테이블 객체 로드. 없으면 None"""
    table_name = os.environ.get(env_name, "").strip()
    if not table_name:
        print(f"Config Error: Environment variable {env_name} is missing")
        return None
    return _DYNAMO.Table(table_name)


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _redirect_response(location: str) -> dict:
    return {
        "statusCode": 302,
        "headers": {
            "Location": location,
            "Cache-Control": "no-cache",
        },
        "body": "",
    }


def handler(event, context):
    try:
        short_code = ((event.get("pathParameters") or {}).get("shortCode") or "").strip()
        if not short_code:
            return _response(400, {"error": "shortCode is required"})

        try:
            base = parse_base(os.environ.get("SHORT_CODE_BASE"))
            valid = is_valid_code(short_code, base)
        except OutOfRangeError as e:
            print(f"Config Error: {e}")
            return _response(500, {"error": "Server configuration error (SHORT_CODE_BASE)"})

        # 진법에 맞지 않는 코드는 DB 조회 없이 거절
        if not valid:
            return _response(400, {"error": "invalid shortCode"})

        mapping_table = _get_table("TABLE_NAME")
        if mapping_table is None:
            return _response(500, {"error": "Server configuration error (TABLE_NAME)"})

        item = mapping_table.get_item(Key={"shortCode": short_code}).get("Item")
        if not item or not item.get("original_url"):
            return _response(404, {"error": "URL not found"})

        return _redirect_response(item["original_url"])

    except ClientError as e:
        print(f"AWS Error: {e.response['Error']['Message']}")
        return _response(500, {"error": "Internal Database Error"})
    except Exception as e:
        print(f"Handler Error: {e}")
        return _response(500, {"error": "Internal Server Error"})
