from blinker import Namespace

_jsonapi = Namespace()

before_fetch = _jsonapi.signal('before-fetch')

after_fetch = _jsonapi.signal('after-fetch')
