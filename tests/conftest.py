from config import ApplicationConfig

# Cheap hashes keep the suite fast; production default is 12
ApplicationConfig.BCRYPT_ROUNDS = 4
