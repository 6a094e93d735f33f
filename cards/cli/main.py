"""牌组命令行界面.

这个模块是核心操作的薄调用层，只负责解析参数、加载配置和输出，
不包含任何牌组逻辑。
"""

import logging
from typing import Optional

import click

from cards.core import CardsError, build_deck, deal, load_config, print_deck
from cards.core.config import VALID_LOG_LEVELS, DeckConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """配置日志输出，只在程序入口调用一次."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger('cards').setLevel(numeric_level)


@click.group()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help='YAML配置文件路径')
@click.option('--log-level', type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
              default=None, help='日志级别，覆盖配置文件')
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], log_level: Optional[str]) -> None:
    """构建、打印和拆分一副16张的牌."""
    try:
        config = load_config(config_path, log_level=log_level)
    except CardsError as e:
        raise click.ClickException(str(e))

    setup_logging(config.log_level)
    logger.debug("使用配置: %s", config)
    ctx.obj = config


@main.command()
@click.pass_obj
def show(config: DeckConfig) -> None:
    """打印整副牌."""
    print_deck(build_deck(), separator=config.separator)


@main.command(name='deal')
@click.option('--hand-size', type=int, default=None, help='手牌数，默认取配置中的hand_size')
@click.pass_obj
def deal_command(config: DeckConfig, hand_size: Optional[int]) -> None:
    """发一手牌，并打印手牌和剩余牌."""
    if hand_size is None:
        hand_size = config.hand_size

    try:
        hand, remainder = deal(build_deck(), hand_size)
    except CardsError as e:
        raise click.ClickException(str(e))

    click.echo("Hand:")
    print_deck(hand, separator=config.separator)
    click.echo("Remainder:")
    print_deck(remainder, separator=config.separator)


if __name__ == '__main__':
    main()
