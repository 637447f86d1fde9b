import asyncio


def run(coro):
    """Drive a service coroutine to completion from Streamlit's synchronous script."""
    return asyncio.run(coro)
