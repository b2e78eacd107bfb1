# skillupnow/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from skillupnow.domain.errors import ConcurrentModificationError
from skillupnow.utils.settings import CART_UPDATE_ATTEMPTS


#tenacity retry dla optimistic locking koszyka
#powtarzamy caly read-modify-write, nie sam UPDATE
def cart_retry(attempts: int | None = None):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or CART_UPDATE_ATTEMPTS),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
        retry=retry_if_exception_type(ConcurrentModificationError),
    )
