from django.core.serializers.json import DjangoJSONEncoder
from django.http import JsonResponse


def error_body(code: str, message: str, status_code: int, **extra) -> dict:
    data = {'status': status_code}
    data.update(extra)
    return {
        'code': code,
        'message': message,
        'data': data,
    }


class JsonErrorResponse(JsonResponse):
    def __init__(self, code: str, message: str, status: int, encoder=DjangoJSONEncoder, safe=True,
                 json_dumps_params=None, **kwargs):
        super().__init__(error_body(code, message, status), encoder, safe, json_dumps_params, status=status, **kwargs)
