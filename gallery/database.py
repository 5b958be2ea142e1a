# gallery/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()

def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """데이터베이스 엔진 생성"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # 워커 스레드에서 같은 연결 사용 허용
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        echo=echo,  # SQL 쿼리 로그 출력
        connect_args=connect_args
    )

def create_session_factory(engine: Engine) -> sessionmaker:
    """세션 팩토리"""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine
    )
