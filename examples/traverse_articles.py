import asyncio
import logging
import sys

from potion_jsonapi import Document, RequestsContext


async def traverse(url):
    context = RequestsContext(timeout=10)
    document = await Document.from_url(url, context, sparse_fields={'people': ['name']})

    for article in document.resources:
        print(article.attributes.get('title'))

        author = await article.related_resource['author']
        if author is not None:
            print('  by', author.attributes.get('name'))

        for comment in await article.related_resources['comments']:
            print('  -', comment.attributes.get('body'))


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(traverse(sys.argv[1] if len(sys.argv) > 1 else 'http://localhost:5000/articles'))
