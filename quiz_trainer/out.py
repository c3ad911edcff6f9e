"""
Output helpers that write coloured text to a line channel
"""

from colorama import Fore, Style

COLORS = {
    'black': Fore.BLACK,
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'magenta': Fore.MAGENTA,
    'cyan': Fore.CYAN,
    'white': Fore.WHITE,
}

def colorize(msg, color=None, enabled=True):
    """
    Give colour to a string

    Arguments:
        msg (any): Text to colour, converted with str()
        color (str): One of the COLORS names, or None to leave it plain
        enabled (bool): When False the text is returned without escape codes
    """

    msg = str(msg)
    if color is None or not enabled:
        return msg
    return f'{Style.BRIGHT}{COLORS[color]}{msg}{Style.RESET_ALL}'

def log(channel, msg, color=None):
    channel.write_line(colorize(msg, color, channel.color))

def biglog(channel, msg, color=None):
    """
    Write a framed banner
    """

    border = '=' * (len(msg) + 4)
    for line in (border, f'  {msg.upper()}  ', border):
        log(channel, line, color)

def errorlog(channel, emsg):
    channel.write_line(f"{colorize('Error', 'red', channel.color)}: {colorize(emsg, 'red', channel.color)}")
