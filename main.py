import asyncio
import random

from utils import *
from config import *


async def main():
    if len(keys) == 0:
        logger.error('Не вставлен приватный ключ или мнемоника в файл keys.txt!...')
        return
    if network not in rpcs or rpcs[network] == '':
        logger.error(f'Не вставлен rpc для сети {network} в файле config!...')
        return
    try:
        claims = parse_claims(claim_rows)
    except ValueError as e:
        logger.error(f'Ошибка в файле claims.txt: {e}...')
        return
    if len(claims) == 0:
        logger.error('Нет адресов для клейма в файле claims.txt!...')
        return

    proxy = random.choice(proxies) if proxies else None
    sui = SuiClaim(keys[0], network, proxy)
    logger.info(f'{sui.address} - начинаю работу на {len(claims)} адресах, батч {batch_size}...')

    results = await sui.add_claims(claims, batch_size)
    sent = [result for result in results if result is not None]

    logger.success(f'{sui.address} - отправлено {len(sent)} из {len(results)} транзакций...')


if __name__ == '__main__':
    asyncio.run(main())
