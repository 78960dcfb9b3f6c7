"""
Schemas
File: actions.py

Purpose: Enumerate the action modules the client accepts in ``action=``.
This file has no imports from other schema files to avoid circular
dependencies.
"""

from enum import Enum


class Action(str, Enum):
    """Core MediaWiki action API modules."""

    BLOCK = "block"
    CHANGEAUTHENTICATIONDATA = "changeauthenticationdata"
    CHANGECONTENTMODEL = "changecontentmodel"
    CHECKTOKEN = "checktoken"
    CLEARHASMSG = "clearhasmsg"
    CLIENTLOGIN = "clientlogin"
    COMPARE = "compare"
    CREATEACCOUNT = "createaccount"
    DELETE = "delete"
    EDIT = "edit"
    EMAILUSER = "emailuser"
    EXPANDTEMPLATES = "expandtemplates"
    FEEDCONTRIBUTIONS = "feedcontributions"
    FEEDRECENTCHANGES = "feedrecentchanges"
    FEEDWATCHLIST = "feedwatchlist"
    FILEREVERT = "filerevert"
    HELP = "help"
    IMAGEROTATE = "imagerotate"
    IMPORT = "import"
    LINKACCOUNT = "linkaccount"
    LOGIN = "login"
    LOGOUT = "logout"
    MANAGETAGS = "managetags"
    MERGEHISTORY = "mergehistory"
    MOVE = "move"
    OPENSEARCH = "opensearch"
    OPTIONS = "options"
    PARAMINFO = "paraminfo"
    PARSE = "parse"
    PATROL = "patrol"
    PROTECT = "protect"
    PURGE = "purge"
    QUERY = "query"
    REMOVEAUTHENTICATIONDATA = "removeauthenticationdata"
    RESETPASSWORD = "resetpassword"
    REVISIONDELETE = "revisiondelete"
    ROLLBACK = "rollback"
    RSD = "rsd"
    SETNOTIFICATIONTIMESTAMP = "setnotificationtimestamp"
    SETPAGELANGUAGE = "setpagelanguage"
    STASHEDIT = "stashedit"
    TAG = "tag"
    UNBLOCK = "unblock"
    UNDELETE = "undelete"
    UNLINKACCOUNT = "unlinkaccount"
    UPLOAD = "upload"
    USERRIGHTS = "userrights"
    VALIDATEPASSWORD = "validatepassword"
    WATCH = "watch"


SUPPORTED_ACTIONS: frozenset[str] = frozenset(a.value for a in Action)


def is_supported_action(action: str) -> bool:
    """Check if an action name is supported without raising."""
    return action in SUPPORTED_ACTIONS
