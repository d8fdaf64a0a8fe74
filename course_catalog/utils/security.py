from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from jose import jwt

ALGORITHM = "HS256"
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)

def create_access_token(subject: str, secret_key: str, expires_minutes: int) -> str:
    now = datetime.now(timezone.utc)
    to_encode = {"sub": subject, "iat": now, "exp": now + timedelta(minutes=expires_minutes)}
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)

def decode_token(token: str, secret_key: str) -> dict:
    return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
