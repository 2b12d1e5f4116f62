"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 얇은 실행 표면입니다. 레지스트리에 등록된 Generator를 선택하여
InventoryCollector로 실행하고 결과를 콘솔 테이블 또는 JSON으로 출력합니다.

명령어 구조:
    inventory --version
    inventory generators                              # 등록된 provider/service 목록
    inventory discover -P aws -S cloudformation -r us-east-1
    inventory discover -P aws -p my-profile -w 2 -f json
    inventory discover -P octopusdeploy --octopus-url https://octopus.example.com

종료 코드:
    0: 모든 Generator 성공
    1: 하나 이상의 Generator 실패
"""

from __future__ import annotations

import json
from typing import Any

import click

from core.config import get_env_bool, get_env_int, get_version, settings
from core.inventory import GeneratorSelection, InventoryCollector, InventoryResult, default_registry
from providers import PROVIDER_PACKAGES, client_factory_for, load_providers

from .ui import console, print_error, print_inventory, setup_logging


def _provider_options(provider: str, **values: Any) -> dict[str, Any]:
    """프로바이더별 클라이언트 옵션 구성"""
    if provider == "octopusdeploy":
        return {
            "server": values.get("octopus_url"),
            "api_key": values.get("octopus_api_key"),
            "space": values.get("octopus_space"),
        }
    return {"profile": values.get("profile"), "region": values.get("region")}


def _result_to_json(result: InventoryResult) -> str:
    payload = {
        "resources": [d.to_dict() for d in result.get_descriptors()],
        "errors": [{"generator": o.key, "error": str(o.error)} for o in result.failed],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


@click.group()
@click.version_option(version=get_version(), prog_name="inventory")
def cli() -> None:
    """클라우드/SaaS 리소스 인벤토리 탐색"""


@cli.command("generators")
def list_generators() -> None:
    """등록된 Generator 목록"""
    load_providers()
    for provider, service in default_registry.keys():
        console.print(f"{provider}/{service}")


@cli.command("discover")
@click.option("-P", "--provider", required=True, type=click.Choice(sorted(PROVIDER_PACKAGES)), help="프로바이더")
@click.option("-S", "--service", "services", multiple=True, help="서비스 (반복 가능, 기본: 전체)")
@click.option("-p", "--profile", default=None, help="AWS 프로파일")
@click.option("-r", "--region", default=None, help="AWS 리전")
@click.option("--octopus-url", envvar="OCTOPUS_URL", default=None, help="Octopus Deploy 서버 URL")
@click.option("--octopus-api-key", envvar="OCTOPUS_API_KEY", default=None, help="Octopus Deploy API 키")
@click.option("--octopus-space", envvar="OCTOPUS_SPACE", default=None, help="Octopus Deploy Space ID")
@click.option(
    "-w",
    "--workers",
    default=lambda: get_env_int("INVENTORY_WORKERS", 1),
    type=click.IntRange(1, settings.MAX_WORKERS),
    help=f"병렬 Generator 수 (기본: INVENTORY_WORKERS 또는 1, 최대 {settings.MAX_WORKERS})",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    default="console",
    show_default=True,
    type=click.Choice(["console", "json"]),
    help="출력 형식",
)
@click.option("-v", "--verbose", is_flag=True, help="DEBUG 로그 출력 (INVENTORY_VERBOSE=true와 동일)")
@click.pass_context
def discover(
    ctx: click.Context,
    provider: str,
    services: tuple[str, ...],
    workers: int,
    output_format: str,
    verbose: bool,
    **values: Any,
) -> None:
    """Generator를 실행하여 리소스 인벤토리 출력"""
    setup_logging(verbose or get_env_bool("INVENTORY_VERBOSE"))
    load_providers()

    available = default_registry.services(provider)
    selected = list(services) or available
    unknown = [s for s in selected if s not in available]
    if unknown:
        raise click.BadParameter(
            f"{', '.join(unknown)} (사용 가능: {', '.join(available)})",
            param_hint="--service",
        )

    options = _provider_options(provider, **values)
    selections = [GeneratorSelection(provider, s, client_factory_for(provider, s, **options)) for s in selected]
    result = InventoryCollector().collect(selections, max_workers=workers)

    if output_format == "json":
        click.echo(_result_to_json(result))
        if result.error_count:
            print_error(result.get_error_summary())
    else:
        print_inventory(result)

    if result.error_count:
        ctx.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
