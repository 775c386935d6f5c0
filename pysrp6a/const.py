"""This module contains constants used by other modules."""
from types import MappingProxyType

MAJOR_VERSION = 1
MINOR_VERSION = 0
PATCH_VERSION = 0
__short_version__ = f"{MAJOR_VERSION}.{MINOR_VERSION}"
__version__ = f"{__short_version__}.{PATCH_VERSION}"
REQUIRED_PYTHON_VER = (3, 7)

# ### Defaults ###
DEFAULT_GROUP = 2048
DEFAULT_GENERATOR = 2
DEFAULT_HASH = "SHA512"
DEFAULT_TIMEOUT = 300  # seconds, 0 or None disables expiry
DEFAULT_SALT_LENGTH = 16  # bytes
MIN_PRIVATE_VALUE_BITS = 256


# ### Predefined safe prime groups, keyed by bit length ###
PRIME_GROUPS = MappingProxyType(
    {
        256: int(
            "125617018995153554710546479714086468244499594888726646874671447258204721"
            "048803"
        ),
        512: int(
            "111442524391495334178357495561689917369391577789249470372002683586138633"
            "500403390170977902591547509060724911816060447742154134678519897241163315"
            "97513345603"
        ),
        768: int(
            "108717913510545785907206564905906976028054008697581762906644468236689618"
            "779357073657454998148886821784362709486792480034288709606484422783673566"
            "716831998128876537749980638548991334148872415256288091843870112953060613"
            "9552645689583147"
        ),
        1024: int(
            "167609434410335061345139523764350090260135525329813904557420930309800865"
            "859473551531551523800013916573891864789934747039010546328480848979516637"
            "673776605610374669426214776197828492691384519453218253702788022233205683"
            "635831626913357154941914129985489522629902540768368409482248290641036967"
            "659389658897350067939"
        ),
        1536: int(
            "148699818592312829281650735361940952115245766259638007461481896681024497"
            "482775241142038033651407883231473149993831319753314799856530102079704078"
            "742805147963931692801599841570910129390297107296048752741106808231176317"
            "154917052800862081339141144590758491286522207610072605025527156774921390"
            "533065926490865722112428466544482547474108770497447579550549282158574941"
            "763934496719230174903332535928627343167549286649241694115264694090810147"
            "2416714421046022696100064262587"
        ),
        2048: int(
            "217661744586174357731910088918027537819076683742555385111446432246898862"
            "353838409572109090130860564015713997172358072665816496064721484102914133"
            "641521973644771808873956554837381150726774022351017625219015698207402931"
            "495296204193332662620734710545483687360395197024862265062488610602569718"
            "029849535611214426801576680007614299882224570904138739739701719270939921"
            "147517651680636147611196154762334220964427831179712363716473338714143358"
            "957734746673089670508070055093204247996784170368679283167612722742303140"
            "675482911335824795830614395775593471019617714061736843785227034834953370"
            "37655006751328447510550299250924469288819"
        ),
    }
)
