"""支持 python -m cards 运行命令行界面."""

from cards.cli import main

if __name__ == '__main__':
    main(prog_name='cards')
