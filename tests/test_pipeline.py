"""
Tests for PipelineTransport step ordering and short-circuiting.
"""
import httpx
import pytest

from eshop.integrations.pipeline import PipelineTransport


def _tagging_step(name, order):
    async def step(request, call_next):
        order.append(f"{name}:before")
        request.headers[f"X-{name}"] = "1"
        response = await call_next(request)
        order.append(f"{name}:after")
        return response

    return step


@pytest.mark.asyncio
async def test_steps_run_in_order_around_terminal_transport():
    order = []

    def terminal(request):
        order.append("transport")
        return httpx.Response(200, headers={"X-Seen": ",".join(sorted(
            key for key in request.headers.keys() if key.startswith("x-")
        ))})

    transport = PipelineTransport(
        [_tagging_step("outer", order), _tagging_step("inner", order)],
        transport=httpx.MockTransport(terminal),
    )

    async with httpx.AsyncClient(transport=transport, base_url="http://catalog") as client:
        response = await client.get("/api/v1/catalog/genders")

    assert order == ["outer:before", "inner:before", "transport", "inner:after", "outer:after"]
    assert response.headers["X-Seen"] == "x-inner,x-outer"


@pytest.mark.asyncio
async def test_short_circuiting_step_skips_transport():
    calls = []

    async def deny(request, call_next):
        return httpx.Response(403, request=request)

    transport = PipelineTransport(
        [deny],
        transport=httpx.MockTransport(lambda request: calls.append(request) or httpx.Response(200)),
    )

    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.get("http://catalog/health")

    assert response.status_code == 403
    assert calls == []


@pytest.mark.asyncio
async def test_no_steps_calls_transport_directly():
    transport = PipelineTransport(transport=httpx.MockTransport(lambda request: httpx.Response(204)))

    async with httpx.AsyncClient(transport=transport) as client:
        response = await client.delete("http://basket/api/v1/basket/1")

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_aclose_closes_terminal_transport():
    closed = []

    class ClosingTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            return httpx.Response(200)

        async def aclose(self):
            closed.append(True)

    transport = PipelineTransport(transport=ClosingTransport())
    await transport.aclose()

    assert closed == [True]
