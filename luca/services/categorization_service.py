"""
Rule-based categorization of transaction descriptions.

Rules are checked in the order they appear in RULES and the first hit wins, so
a description that matches keywords from several categories always resolves to
the earliest one. Keyword matching is a case-insensitive substring test;
exact matches compare the untouched description, case-sensitively.
"""

from decimal import Decimal
from typing import NamedTuple, Tuple, Union

from luca.schemas.category import Category


class CategoryRule(NamedTuple):
    category: Category
    keywords: Tuple[str, ...]
    exact_match: Tuple[str, ...] = ()


RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(
        Category.housing,
        ('aribau 9', 'piso', 'renta junio', 'renta sept', 'renta agosto', 'renta oct', 'renta nov'),
        exact_match=('WEON BALMES',),
    ),
    CategoryRule(Category.supermarket, (
        'coaliment', 'aldi', 'lidl', 'eroski', 'sorli', 'mercadona', 'charter', 'primaprix',
        'proxim', 'condis', 'alcampo', 'casa ametller', 'nick fruit', 'peixnot', 'macia ninot',
        'supermercat', 'supermercado', 'super shop', 'superestalvi', 'cife super',
        'montse y angel', 'escofet oliver', 'discount concejo', 'jespac',
    )),
    CategoryRule(Category.food, (
        'bar', 'restaurant', 'cafe', 'taverna', 'pizz', 'kebab', 'tapas', 'cervece',
        'grill', 'braseria', 'asador', 'taberna', 'bocata', 'empanada', 'creps',
        'gelat', 'heladeria', 'focacceria', 'makamaka', 'champanillo', 'ovella',
        'casa carmen', 'cu-cut', 'la cala', 'corallo', 'vinitus', 'tribeca',
        'vermuteca', 'noa noa', 'delacrem', 'sandwichez', 'milanesa', 'mingaton',
        'despensa', 'croq', 'forn mistral', 'roxy', 'jaleo', 'la rica kitchen',
        'doner', 'iskender', 'istanbul', 'rey de istanbul', 'savannah', 'caliente',
        'miramelindo', 'bilbao berria', 'dock', 'indian', 'ogham', 'kopas',
        'xativa', 'massamara', 'oassis', 'grandegracia', 'a prop', 'boys bar',
        'kostan', 'akelarre', 'snack', 'pecera', 'picaro', 'boa',
        'la fira', 'ideal cocktail', 'soma bar', 'arc de triomf',
        'comida', 'el copetin', 'torreon', 'spirale', 'hoppiness',
        'orxateria', 'anita helado', 'xoroi', 'ciao', 'peter cafe',
        'brasabuey', 'atseden', 'artajo', 'e.s. buenavista',
        'bonny and gava', 'decruzmorales', 'cottage', 'weon',
    )),
    CategoryRule(Category.subscriptions, (
        'spotify', 'apple.com/bill', 'openai', 'chatgpt', 'bicing', 'grit ventures',
    )),
    CategoryRule(Category.transport, (
        'taxi', 'vueling', 'bicing', 'metropolitano', 'sata air', 'airasia',
        'bus/mrt', 'grab*', 'gasolina', 'e.s.', 'carburant', 'low cost fuel',
        'estacion servicio',
    )),
    CategoryRule(Category.shopping, (
        'decathlon', 'primark', 'zara', 'shein', 'intimissimi', 'c&a',
        'perfumeria primor', 'druni', 'bazar angela', 'armario y vida',
        'belles arts', 'skechers', 'buy non stop', 'fashion bug',
        'vistesdesalts', 'el corte ingles', 'crearte', 'plana y dieguez',
        'gran via 443', 'multimarca',
    )),
    CategoryRule(Category.health, (
        'farmacia', 'herbolario', 'herbolari', 'nusa medika', 'nawaloka',
        'hospital', 'productos parami', 'peak health', 'diet doctor',
        'gili air clinic',
    )),
    CategoryRule(Category.entertainment, (
        'fever', 'razzmatazz', 'discoteca', 'disco', 'sala', 'never bar',
        'miles away', 'entrapolis', 'dl palau', 'mooby', 'companyia central',
        'cova d', 'magic', 'garage beer', 'rei de copas', 'fira casanova',
        'instasorteos', 'iluzione', 'games',
    )),
    CategoryRule(Category.travel, (
        'gotogate', 'booking', 'agoda', 'hostel', 'hotel', 'equity point',
        'safestay', 'azores', 'marina bay', 'vueling', 'ruki dia',
        'enjoy it', 'sikim', 'jijonenca', 'ona', 'atlas tapas',
        'fanals', 'guille azores', 'monbus', 'tpi bandara',
        'payhere', 'adroit', 'aloft', 'mandapa', 'bali',
        'sol & luna', 'penida', 'lighthouse', "deja'vu",
        'fuvahmulah', 'pirates of maldiv', 'zola.com',
        'azorazul', 'catalonia barcelo', 'n n gromov',
        'ida-insurance',
    )),
    CategoryRule(Category.taxes, (
        'irpf', 'iva', 'tributos', 'impuesto renta', 'pagos a.e.a.t',
        'embargo', 'bsm dip grues', 'ajunt bcn',
    )),
    CategoryRule(Category.transfers, (
        'traspaso propio', 'transfer.hucha', 'revolut', 'transf.', 'trf.internacional',
        'bizum', 'wise', 'mycard', 'movimientos tarje', 'cuota dia a dia',
        'reint.cajero', 'ingreso cajero', 'complementos abri',
    )),
    CategoryRule(Category.income, (
        'transf. a su favor', 'arag s.e.', 'mm e.f. sant anto', 'divevolk',
    )),
    CategoryRule(Category.diving, (
        'vertical freediv', 'divevolk', 'dream dive', 'aigua esport',
        'picornell', 'scuba', 'dive',
    )),
    CategoryRule(Category.technology, (
        'apple store', 'informatica', 'optikseis', 'name-cheap', 'go daddy',
        'sumup', 'happymovil', 'simyo', 'directf*',
        'pfs zacatrus', 'microfusa', 'lavado suave',
    )),
)

TRANSFER_KEYWORDS = next(rule.keywords for rule in RULES if rule.category == Category.transfers)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword.lower() in text for keyword in keywords)


def categorize(description: str, amount: Union[Decimal, float]) -> Category:
    """Return the category for a description and signed amount."""
    lower = description.lower()

    # Money in is either a transfer or income, never a spending category
    if amount > 0:
        if _contains_any(lower, TRANSFER_KEYWORDS):
            return Category.transfers
        return Category.income

    for rule in RULES:
        if description in rule.exact_match:
            return rule.category
        if _contains_any(lower, rule.keywords):
            return rule.category

    return Category.other
