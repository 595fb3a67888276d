import asyncio
from functools import wraps
from urllib.parse import urlsplit, urlunsplit, urlencode


def memoized_coroutine(fn):
    """
    Decorator for coroutine methods without arguments. The first call schedules the coroutine as a task stored on
    the instance; later calls await that same task. A cancelled caller stops waiting without cancelling the task.
    A task that fails is dropped so the next call starts over.
    """
    key = '_memoized_{}'.format(fn.__name__)

    @wraps(fn)
    async def wrapper(self):
        task = self.__dict__.get(key)
        if task is None:
            task = asyncio.ensure_future(fn(self))
            self.__dict__[key] = task

            def evict_failed(done):
                if (done.cancelled() or done.exception() is not None) and self.__dict__.get(key) is done:
                    del self.__dict__[key]

            task.add_done_callback(evict_failed)
        return await asyncio.shield(task)
    return wrapper


def with_sparse_fields(url, sparse_fields):
    """
    Append one ``fields[<type>]`` query parameter per entry in ``sparse_fields`` to ``url``. Existing query
    parameters are kept as they are.

    :param str url: absolute URL
    :param dict sparse_fields: mapping from resource type to a list of field names
    """
    if not sparse_fields:
        return url
    scheme, netloc, path, query, fragment = urlsplit(url)
    fields = urlencode([('fields[{}]'.format(resource_type), ','.join(field_names))
                        for resource_type, field_names in sparse_fields.items()])
    query = '{}&{}'.format(query, fields) if query else fields
    return urlunsplit((scheme, netloc, path, query, fragment))
