from py_fips202 import SHA3_224, SHA3_256, SHA3_384, SHA3_512, InvalidInputLength


# Sandbox
if __name__ == '__main__':
    # Digests of the empty message
    for h in (SHA3_224, SHA3_256, SHA3_384, SHA3_512):
        print(h.name, h(''))

    # "abc", given as hex
    print(SHA3_256('616263'))

    # A message spanning several rate blocks
    print(SHA3_512('a3'*200))

    # Odd-length messages are refused
    try:
        SHA3_256('abc')
    except InvalidInputLength as e:
        print(e)
