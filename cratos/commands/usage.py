"""Usage text printed by ``cratos --help`` and for unknown commands."""

USAGE = """\
usage: cratos [--version] [-v] [--help] [-h] [--path=<path>] <command> [<args>]

commands:

    list, ls                      list cratos modules

    branch, b                     get branch for cratos modules

    s[tatus]                      get status for cratos modules

    ch[eckout] <branch>           checkout branch for relevant cratos modules

    fetch                         fetch remotes for cratos modules

    merge                         merge remote into current branch for cratos modules

    pull                          fetch+merge remote into current branch for cratos modules

    push                          push current branch to remote for cratos modules

    dist <major|minor|patch>      version bump && publish cratos modules, skip unchanged modules

    clean                         remove ignored and untracked files for cratos modules

    i[nstall]                     install cratos module dependencies into local node_modules

    i[nstall] --save, -s <mod>    install and save mod into cratos module dependencies modify package.json

    link, ln                      symlink cratos modules into all other cratos modules' local node_modules
"""


def get_usage() -> str:
    """Usage text as written to stdout, including the final newline."""
    return USAGE + "\n"
