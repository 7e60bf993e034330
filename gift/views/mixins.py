"""View mixins for common functionality"""

import logging

from rest_framework import serializers, status
from rest_framework.response import Response

from gift.services.base import AlreadyExistsError, InvalidCredentialError, NotFoundError, ServiceError

logger = logging.getLogger(__name__)


class ErrorResponseSerializer(serializers.Serializer):
    """에러 응답 (Swagger 문서화용)"""

    error = serializers.CharField()
    code = serializers.CharField()


class ServiceErrorResponseMixin:
    """
    서비스 예외를 HTTP 응답으로 변환하는 Mixin

    - AlreadyExistsError → 409
    - NotFoundError → 404
    - InvalidCredentialError → 401
    - 그 외 ServiceError → 400
    """

    status_map = {
        AlreadyExistsError: status.HTTP_409_CONFLICT,
        NotFoundError: status.HTTP_404_NOT_FOUND,
        InvalidCredentialError: status.HTTP_401_UNAUTHORIZED,
    }

    def _handle_service_error(self, error: ServiceError) -> Response:
        """서비스 에러를 HTTP 응답으로 변환"""
        http_status = status.HTTP_400_BAD_REQUEST
        for error_class, mapped_status in self.status_map.items():
            if isinstance(error, error_class):
                http_status = mapped_status
                break

        response_data = {"error": error.message, "code": error.code}
        if error.details:
            response_data.update(error.details)

        logger.info("서비스 에러 응답 | status=%d, code=%s", http_status, error.code)
        return Response(response_data, status=http_status)
