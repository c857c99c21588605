"""Per-language stopword tables keyed by ISO 639-1 code."""

from __future__ import annotations

from collections.abc import Iterable


_ENGLISH = """
a about above after again against all am an and any are as at be because been before being below between
both but by can did do does doing down during each few for from further had has have having he her here
hers herself him himself his how i if in into is it its itself just me more most my myself no nor not now
of off on once only or other our ours ourselves out over own same she should so some such than that the
their theirs them themselves then there these they this those through to too under until up very was we
were what when where which while who whom why will with you your yours yourself yourselves
"""

_FRENCH = """
au aux avec ce ces dans de des du elle en et eux il ils je la le les leur lui ma mais me meme mes moi mon
ne nos notre nous on ou par pas pour qu que qui sa se ses son sur ta te tes toi ton tu un une vos votre
vous c d j l a m n s t y ete etais etait est sont suis es etes sommes
"""

_GERMAN = """
aber alle allem allen aller alles als also am an ander andere anderem anderen anderer anderes auch auf aus
bei bin bis bist da damit dann das dass dasselbe dazu dein deine dem den denn der des dich die dies diese
dieselbe diesem diesen dieser dieses dir doch dort du durch ein eine einem einen einer eines er es euer
eure fur hatte hatten hier hin hinter ich ihr ihre im in ist ja jede jedem jeden jeder jedes kann kein
man mein mich mir mit muss nach nicht nichts noch nun nur ob oder ohne sehr sein seine sich sie sind so
solche um und uns unter viel vom von vor war waren was weil welche wenn wer wie wir wird wo zu zum zur
"""

_SPANISH = """
a al algo algunas algunos ante antes como con contra cual cuando de del desde donde durante e el ella
ellas ellos en entre era es esa esas ese eso esos esta estas este esto estos fue ha hay la las le les lo
los mas me mi mis mucho muy nada ni no nos o os otra otro para pero poco por porque que quien se sea sin
sobre su sus tambien te tiene todo tu tus un una uno unos y ya yo
"""

_ITALIAN = """
a ad al alla alle allo anche che chi ci come con contro da dal dalla dei del della delle dello di e ed
gli ha hanno i il in io la le lei li lo loro lui ma mi mia mio ne negli nei nel nella noi non o per piu
quale quando quella quelle quello questa queste questo se si sono su sua sue sui sul sulla suo tra tu un
una uno voi
"""

_PORTUGUESE = """
a ao aos as com como da das de do dos e ela elas ele eles em entre era essa esse esta este eu foi ha isso
isto ja la lhe mais mas me meu minha muito na nao nas nem no nos o os ou para pela pelo por qual quando
que quem se sem seu sua suas seus so tambem te tem um uma voce
"""

_DUTCH = """
aan al alles als altijd andere ben bij daar dan dat de der deze die dit doch doen door dus een eens en er
ge geen geweest haar had heb hebben heeft hem het hier hij hoe hun iemand iets ik in is ja je kan kon
kunnen maar me meer men met mij mijn moet na naar niet niets nog nu of om omdat onder ons ook op over reeds
te tegen toch toen tot u uit uw van veel voor want waren was wat werd wezen wie wil worden wordt zal ze
zelf zich zij zijn zo zonder zou
"""

_TABLES: dict[str, frozenset[str]] = {
    code: frozenset(words.split())
    for code, words in (
        ("en", _ENGLISH),
        ("fr", _FRENCH),
        ("de", _GERMAN),
        ("es", _SPANISH),
        ("it", _ITALIAN),
        ("pt", _PORTUGUESE),
        ("nl", _DUTCH),
    )
}


def available_languages() -> list[str]:
    return sorted(_TABLES)


def get_stopwords(language: str) -> frozenset[str]:
    """Return the stopword table for ``language`` (empty when unknown)."""
    return _TABLES.get(language.lower(), frozenset())


def register_stopwords(language: str, words: Iterable[str], *, replace: bool = False) -> None:
    """Add (or replace) the stopword table for ``language``.

    Words are stored lowercased; tables are matched against already
    normalized tokens.
    """
    code = language.lower()
    incoming = {word.lower() for word in words}
    if replace or code not in _TABLES:
        _TABLES[code] = frozenset(incoming)
    else:
        _TABLES[code] = _TABLES[code] | incoming
