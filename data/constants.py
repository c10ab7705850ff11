PROJECT_NAME = "Bech32 Toolkit"

BENCHMARK_STRING = "abcdef1qpzry9x8gf2tvdw0s3jn54khce6mua7lmqqqxw"
