"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    sqs ls [-1] [-u] [--tsv] [NAMES...]     # 큐 목록 / 속성 테이블
    sqs mv [-l N] SOURCE DEST               # 큐 간 메시지 이동
    sqs send [-a key=value ...] QUEUE       # stdin 본문으로 메시지 전송
    sqs download [-d] [-l N] QUEUE DIR      # 메시지를 <MessageId>.json 파일로 저장

공통 옵션:
    -p, --profile   AWS 프로파일
    -r, --region    리전
    --lang          출력 언어 (ko/en)
    --debug         DEBUG 로그 출력

Usage:
    $ sqs ls
    $ sqs mv -l 100 orders-dlq orders
    $ echo '{"id": 1}' | sqs send -a source=manual orders
"""

import logging

import click
from click import Context

from cli.i18n import set_lang, t
from cli.ui.console import print_error, print_table, print_warning
from core.auth.session import get_sqs_client
from core.config import LogConfig, get_version, settings
from core.exceptions import ConfigError, SQSCliError, ValidationError, format_error_for_user
from shared.aws.sqs import SQSClient, TransferResult
from shared.aws.sqs.types import DISPLAY_COLUMNS

# Keep lightweight, centralized logging config
# WARNING 레벨로 설정하여 INFO 로그가 명령 출력에 섞이지 않도록 함
_log_config = LogConfig.from_env()
logging.basicConfig(
    level=_log_config.level,
    format=_log_config.format,
    datefmt=_log_config.date_format,
)

VERSION = get_version()


# =============================================================================
# 공통 헬퍼
# =============================================================================


def _get_sqs(ctx: Context) -> SQSClient:
    """context에 저장된 client로 SQSClient 생성 (없으면 프로파일/리전으로 생성)"""
    obj = ctx.ensure_object(dict)
    if obj.get("client") is None:
        try:
            obj["client"] = get_sqs_client(obj.get("profile"), obj.get("region"))
        except ConfigError as e:
            print_error(format_error_for_user(e))
            ctx.exit(1)
    return SQSClient(obj["client"])


def _parse_attributes(values: tuple[str, ...]) -> dict[str, str]:
    """-a key=value 옵션을 dict로 변환"""
    attributes: dict[str, str] = {}
    for value in values:
        key, sep, val = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(t("common.invalid_attribute", value=value), param_hint="'-a'")
        attributes[key] = val
    return attributes


def _finish_transfer(ctx: Context, result: TransferResult, message_key: str) -> None:
    """처리 건수를 출력하고, 중단 원인이 있으면 출력 후 exit 1"""
    click.echo(t(message_key, count=result.processed))
    if result.error is not None:
        print_error(format_error_for_user(result.error))
        ctx.exit(1)


# =============================================================================
# 메인 그룹
# =============================================================================


@click.group()
@click.version_option(VERSION, prog_name="sqs")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default=settings.DEFAULT_LANG,
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("--debug", is_flag=True, help="DEBUG 로그 출력")
@click.option("-p", "--profile", default=None, help="AWS 프로파일 (기본: AWS_PROFILE)")
@click.option("-r", "--region", default=None, help="리전 (기본: AWS_REGION)")
@click.pass_context
def cli(ctx: Context, lang: str, debug: bool, profile: str | None, region: str | None) -> None:
    """sqs - SQS 큐 조회 및 메시지 이동/다운로드/전송"""
    set_lang(lang)

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Store options in click context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj.setdefault("profile", profile)
    ctx.obj.setdefault("region", region)


def _build_help_text() -> str:
    """help 텍스트 생성 (명령 요약은 i18n 메시지 사용)"""
    lines = [
        "sqs - SQS CLI",
        "",
        t("cli.help_intro"),
        "",
        "\b",  # Click 줄바꿈 유지 마커
        f"  sqs ls         {t('cli.help_ls')}",
        f"  sqs mv         {t('cli.help_mv')}",
        f"  sqs send       {t('cli.help_send')}",
        f"  sqs download   {t('cli.help_download')}",
    ]
    return "\n".join(lines)


# help 텍스트 동적 설정
cli.help = _build_help_text()


# =============================================================================
# ls
# =============================================================================


@cli.command("ls")
@click.option("-1", "names_only", is_flag=True, help="큐 이름만 한 줄에 하나씩 출력")
@click.option("-u", "urls", is_flag=True, help="-1과 함께 사용: 이름 대신 URL 출력")
@click.option("--tsv", "as_tsv", is_flag=True, help="탭 구분 텍스트로 출력")
@click.argument("names", nargs=-1)
@click.pass_context
def ls_command(ctx: Context, names_only: bool, urls: bool, as_tsv: bool, names: tuple[str, ...]) -> None:
    """큐 목록 및 속성 조회

    \b
    Examples:
        sqs ls                  # 전체 큐 속성 테이블
        sqs ls -1               # 큐 이름 목록
        sqs ls -1 -u            # 큐 URL 목록
        sqs ls orders billing   # 지정한 큐만
        sqs ls --tsv            # 탭 구분 출력
    """
    sqs = _get_sqs(ctx)

    if names_only and not names:
        try:
            queue_urls = sqs.list_queues()
        except SQSCliError as e:
            print_error(format_error_for_user(e))
            ctx.exit(1)
        if not queue_urls:
            click.echo(t("sqs.no_queues"))
            return
        for url in queue_urls:
            click.echo(url if urls else url.name)
        return

    if not names:
        try:
            names = tuple(url.name for url in sqs.list_queues())
        except SQSCliError as e:
            print_error(format_error_for_user(e))
            ctx.exit(1)

    result = sqs.info(names)

    if not result.records and result.success:
        click.echo(t("sqs.no_queues"))
        return

    if as_tsv:
        for record in result.records:
            click.echo(str(record))
    elif result.records:
        print_table(t("sqs.queue_table_title"), list(DISPLAY_COLUMNS), [r.as_row() for r in result.records])

    if not result.success:
        print_warning(t("sqs.fetch_failed", count=len(result.errors)))
        # 실패 사유는 잘리지 않도록 한 줄에 하나씩
        for error in sorted(result.errors, key=lambda e: e.identifier):
            print_error(f"{error.identifier} ({error.category.value}): {error.message}")
        ctx.exit(1)


# =============================================================================
# mv
# =============================================================================


@cli.command("mv")
@click.option("-l", "--limit", type=int, default=0, show_default=True, help="최대 이동 건수 (0 = 전체)")
@click.argument("source")
@click.argument("destination")
@click.pass_context
def mv_command(ctx: Context, limit: int, source: str, destination: str) -> None:
    """큐 간 메시지 이동

    \b
    전송이 확인된 배치만 원본 큐에서 삭제합니다.

    \b
    Examples:
        sqs mv orders-dlq orders          # 전체 이동
        sqs mv -l 10 orders-dlq orders    # 10건만 이동
    """
    if limit < 0:
        print_error(format_error_for_user(ValidationError("limit", limit, ">= 0")))
        ctx.exit(1)

    sqs = _get_sqs(ctx)

    info = sqs.info([source])
    try:
        info.raise_for_errors()
    except SQSCliError as e:
        print_error(format_error_for_user(e))
        ctx.exit(1)

    total = info.records[0].number_of_messages
    if 0 < limit < total:
        click.echo(t("sqs.moving_limited", limit=limit, total=total))
    else:
        click.echo(t("sqs.moving_all", total=total))

    result = sqs.move(source, destination, limit=limit)
    _finish_transfer(ctx, result, "sqs.moved")


# =============================================================================
# send
# =============================================================================


@cli.command("send")
@click.option("-a", "--attribute", "attributes", multiple=True, help="메시지 속성 key=value (다중 가능)")
@click.option("--group-id", default=None, help="FIFO 큐 MessageGroupId")
@click.option("--dedup-id", default=None, help="FIFO 큐 MessageDeduplicationId")
@click.argument("queue")
@click.pass_context
def send_command(
    ctx: Context,
    attributes: tuple[str, ...],
    group_id: str | None,
    dedup_id: str | None,
    queue: str,
) -> None:
    """큐로 메시지 전송 (본문은 stdin)

    \b
    Examples:
        echo 'hello' | sqs send orders
        sqs send -a source=manual -a retry=1 orders < message.json
    """
    parsed = _parse_attributes(attributes)

    body = click.get_text_stream("stdin").read()
    if not body:
        print_error(t("common.empty_body"))
        ctx.exit(1)

    sqs = _get_sqs(ctx)
    try:
        message_id = sqs.send(queue, body, parsed, message_group_id=group_id, deduplication_id=dedup_id)
    except SQSCliError as e:
        print_error(format_error_for_user(e))
        ctx.exit(1)

    click.echo(t("sqs.sent", message_id=message_id))


# =============================================================================
# download
# =============================================================================


@cli.command("download")
@click.option("-d", "--delete", "delete_after", is_flag=True, help="저장 후 원본 큐에서 삭제")
@click.option("-l", "--limit", type=int, default=1, show_default=True, help="최대 저장 건수 (0 = 전체)")
@click.argument("queue")
@click.argument("directory", type=click.Path(file_okay=False))
@click.pass_context
def download_command(ctx: Context, delete_after: bool, limit: int, queue: str, directory: str) -> None:
    """큐 메시지를 파일로 다운로드

    \b
    메시지마다 <DIRECTORY>/<MessageId>.json 파일 하나를 만듭니다.

    \b
    Examples:
        sqs download orders-dlq ./dump            # 1건
        sqs download -l 0 -d orders-dlq ./dump    # 전체 저장 후 삭제
    """
    sqs = _get_sqs(ctx)
    result = sqs.download(queue, directory, limit=limit, delete_after=delete_after)
    _finish_transfer(ctx, result, "sqs.downloaded")

