"""GraphQL HTTP 클라이언트 모듈.

계정 서비스 GraphQL 엔드포인트에 뮤테이션을 전송하는 비동기 HTTP 클라이언트를
제공합니다. 200이 아닌 응답도 예외 없이 반환하여 기대값 평가에 사용합니다.
"""

import time
from types import TracebackType

import httpx
import structlog

from account_contract.constants import Endpoint
from account_contract.exceptions import TransportError
from account_contract.models import HttpResponse, MutationRequest

logger = structlog.get_logger(__name__)


class GraphQLClient:
    """계정 서비스 비동기 GraphQL 클라이언트.

    Args:
        url: GraphQL 엔드포인트 URL
        timeout: HTTP 요청 타임아웃 (초 단위, 기본값: 30.0)
        transport: httpx 전송 계층. 테스트에서 ASGI/Mock 전송을 주입할 때 사용

    Example:
        >>> async with GraphQLClient("http://localhost:8080/graphql") as client:
        ...     response = await client.execute(request)
        ...     print(response.status_code)
    """

    def __init__(
        self,
        url: str,
        timeout: float = Endpoint.REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """내부 httpx.AsyncClient 인스턴스를 반환합니다.

        클라이언트가 아직 생성되지 않은 경우 자동으로 생성합니다.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": Endpoint.CONTENT_TYPE},
            )
        return self._client

    async def __aenter__(self) -> "GraphQLClient":
        """비동기 컨텍스트 매니저 진입."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """비동기 컨텍스트 매니저 종료 시 HTTP 클라이언트를 닫습니다."""
        await self.close()

    async def close(self) -> None:
        """HTTP 클라이언트 연결을 닫습니다."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def execute(self, request: MutationRequest) -> HttpResponse:
        """뮤테이션 요청을 POST로 전송합니다.

        Args:
            request: 전송할 GraphQL 요청

        Returns:
            정규화된 응답 (상태 코드와 무관하게 반환)

        Raises:
            TransportError: 연결 실패, 타임아웃, 본문 디코딩 실패 등으로 응답을 읽지 못한 경우
        """
        started = time.perf_counter()
        try:
            response = await self.client.post(self.url, json=request.to_payload())
        except httpx.ConnectError as e:
            raise TransportError(f"엔드포인트에 연결할 수 없습니다: {self.url}") from e
        except httpx.TimeoutException as e:
            raise TransportError(
                f"요청 시간이 초과되었습니다 ({self.timeout}s): {self.url}"
            ) from e
        except httpx.DecodingError as e:
            raise TransportError(f"응답 본문을 디코딩할 수 없습니다: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"요청 전송에 실패했습니다: {e}") from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.debug(
            "graphql_response",
            url=self.url,
            status_code=response.status_code,
            elapsed_ms=round(elapsed_ms, 2),
        )
        return HttpResponse.from_text(response.status_code, response.text, elapsed_ms=elapsed_ms)
