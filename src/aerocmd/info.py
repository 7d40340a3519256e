""" Parse the text returned by an info request. A response consists of one
    line per requested item, each line being the item name and its value
    separated by a tab. Values are further split according to the known
    structure of the item; for example::

        >>> parse('udf-list\\tfilename=a.lua,hash=17,type=LUA;\\n')
        {'udf-list': [{'filename': 'a.lua', 'hash': 17, 'type': 'LUA'}]}

    Items without a known structure are split on ';' and '=' if they
    contain those separators, and otherwise returned as-is.
"""


def parse(info):
    """ Return a dictionary of the items in the *info* response text.
    """

    if not info:
        return dict()

    items = parse_key_value(info, '\n', '\t')

    for key, value in items.items():
        if not isinstance(value, str):
            continue

        separators = get_separators(key)
        items[key] = split(value, separators)

    return items



def parse_value(value):
    """ Convert *value* to a number if it is the canonical text of one.
    """

    if value is None:
        return None

    try:
        number = int(value)
    except ValueError:
        pass
    else:
        if str(number) == value:
            return number
        return value

    try:
        number = float(value)
    except ValueError:
        return value

    if repr(number) == value:
        return number

    return value



def parse_key_value(text, separator, assignment):

    result = dict()

    for pair in text.split(separator):
        if pair == '':
            continue

        pair = pair.split(assignment, 1)

        if len(pair) == 2:
            key, value = pair
        else:
            key = pair[0]
            value = None

        result[key] = parse_value(value)

    return result



def smart_parse(text, separator=';', assignment='='):

    if isinstance(text, str) and separator in text:
        if assignment in text:
            return parse_key_value(text, separator, assignment)
        else:
            return text.split(separator)

    return text



def split_bins(text):

    stats = dict()
    names = list()

    for element in text.split(','):
        parts = element.split('=', 1)
        if len(parts) == 2:
            stats[parts[0]] = parts[1]
        else:
            names.append(parts[0])

    result = dict()
    result['stats'] = stats
    result['names'] = names
    return result



def normalize_key(key):

    if key.startswith('sindex'):
        if len(key.split('/')) == 3:
            return 'sindex-stats'
        else:
            return 'sindex-list'
    elif key.startswith('bins/'):
        return 'bins-ns'
    elif key.startswith('namespace/'):
        return 'namespace'

    return key



separators = {
    'bins': (';:', split_bins),
    'bins-ns': (split_bins,),
    'namespace': (';=',),
    'service': (';',),
    'sindex-list': (';', ':='),
    'statistics': (';=',),
    'udf-list': (';', ',='),
    'udf-stats': (';=',),
    'get-dc-config': (';', ':='),
}

default_separators = (smart_parse,)


def get_separators(key):
    return separators.get(normalize_key(key), default_separators)



def split(text, separators):
    """ Recursively split *text*. Each separator is either a function, a
        single character (split into a list), or a pair of characters (split
        into a dictionary); the remaining separators apply to each element.
    """

    if len(separators) == 0 or not isinstance(text, str):
        return text

    separator = separators[0]
    remaining = separators[1:]

    if callable(separator):
        return separator(text)

    if len(separator) == 2:
        result = parse_key_value(text, separator[0], separator[1])
        for key, value in result.items():
            result[key] = split(value, remaining)
        return result

    elements = text.split(separator)
    if elements[-1] == '':
        elements.pop()

    return [split(element, remaining) for element in elements]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
