"""An example of a full SRP-6a login.

This is:
1. Register a user: derive a salt and a verifier for the identity store.
2. Run one handshake between a ClientSession and a ServerSession, passing the
    hex values between them as a transport would.
"""
import logging

from pysrp6a.client import ClientSession
from pysrp6a.config import Config
from pysrp6a.routines import create_verifier_and_salt
from pysrp6a.server import ServerSession

logging.basicConfig(level=logging.DEBUG, format="[%(module)s] %(message)s")

config = Config.from_options(group=2048, hash_name="SHA512")
record = create_verifier_and_salt(config.routines, "alice", "password123")

client = ClientSession(config)
server = ServerSession(config)

client.step1("alice", "password123")
B = server.step1(record.I, record.s, record.v)
A, M1 = client.step2(record.s, B)
M2 = server.step2(M1, A)
client.step3(M2)

print("Shared secret agreed:", client.S == server.S)
