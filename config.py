import os


def read_rows(path):
    if not os.path.exists(path):
        return []
    with open(path, "r") as f:
        return [row.strip() for row in f if row.strip()]


# приватный ключ админа в файле keys.txt, берется первая строка
# поддерживается suiprivkey..., мнемоника, hex или base64 из sui.keystore
# пустой сид как в старом скрипте больше не принимается
keys = read_rows("keys.txt")


# прокси - по желанию, в формате log:pass@ip:port в файле proxyy.txt
proxies = read_rows("proxyy.txt")


# список на клейм в файле claims.txt, одна строка - адрес,сумма
# сумма в мисте (1 SUI = 1000000000)
claim_rows = read_rows("claims.txt")


# rpc по желанию можно поменять
rpcs = {'mainnet': 'https://fullnode.mainnet.sui.io:443',
        'testnet': 'https://fullnode.testnet.sui.io:443',
        'devnet': 'https://fullnode.devnet.sui.io:443'}

# кран в этом скрипте не используется
faucets = {'testnet': 'https://faucet.testnet.sui.io/gas',
           'devnet': 'https://faucet.devnet.sui.io/gas'}

# сеть, в которой лежит контракт
network = 'testnet'

# сколько адресов отправлять одной транзакцией, больше 500 контракт не примет
batch_size = 500

# газ бюджет на одну транзакцию в мисте
gas_budget = 1000000000
