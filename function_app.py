import json
import logging
import sys
from pathlib import Path

import azure.functions as func

app = func.FunctionApp()

# ---------------------------------------------------------------
# 1) Azure Functions 고객 패키지 경로 보장
#    GitHub Actions: pip install --target=".python_packages/lib/site-packages"
# ---------------------------------------------------------------
def _ensure_customer_site_packages_on_syspath() -> None:
    base_dir = Path(__file__).resolve().parent
    candidates = [
        Path("/home/site/wwwroot/.python_packages/lib/site-packages"),
        base_dir / ".python_packages" / "lib" / "site-packages",
    ]
    lib_dir = base_dir / ".python_packages" / "lib"
    if lib_dir.exists():
        candidates += list(lib_dir.glob("python*/site-packages"))

    for p in candidates:
        if p.exists():
            sp = str(p)
            if sp not in sys.path:
                sys.path.insert(0, sp)
            logging.info(f"Customer site-packages enabled: {sp}")
            return

    logging.warning("Customer site-packages path not found. Imports may fail.")


_ensure_customer_site_packages_on_syspath()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _json_response(payload: dict, status: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(payload, ensure_ascii=False),
        status_code=status,
        mimetype="application/json",
        headers=CORS_HEADERS,
    )


# ---------------------------------------------------------------
# 2) HTTP 엔드포인트: POST /api/convert  {sql, config} → {code} | {error}
# ---------------------------------------------------------------
@app.route(route="convert", methods=["POST", "OPTIONS"], auth_level=func.AuthLevel.ANONYMOUS)
def convert(req: func.HttpRequest) -> func.HttpResponse:
    from struct_agent.service import handle_convert

    # preflight
    if req.method == "OPTIONS":
        return func.HttpResponse(status_code=200, headers=CORS_HEADERS)

    if req.method != "POST":
        return _json_response({"error": "Method not allowed"}, status=405)

    try:
        body = req.get_json()
    except ValueError as e:
        logging.exception("BAD_JSON")
        return _json_response({"error": f"Invalid JSON: {e}"}, status=400)

    status, payload = handle_convert(body)
    if status != 200:
        logging.info(f"convert() rejected ({status}): {payload.get('error')}")
    return _json_response(payload, status=status)
