#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""로컬 개발용 .env 파일 생성"""
import os
from pathlib import Path

# 프로젝트 루트
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"

# 주의: GEMINI_API_KEY는 발급받은 값으로 직접 교체해야 함
env_content = """# Environment
# 로컬 개발 시 development로 두면 상세 에러 메시지 확인 가능
ENVIRONMENT=development

# Gemini
GEMINI_API_KEY=<GEMINI_API_KEY>
GEMINI_MODEL=gemini-2.5-flash
GEMINI_TIMEOUT_SECONDS=90
GEMINI_MAX_CONCURRENT=5

# 모델 호출 1회당 최대 문제 수
QUIZ_CHUNK_SIZE=10

# CORS
ALLOWED_ORIGINS=http://localhost:3000,http://localhost:9002
"""


def create_env_file():
    """.env 파일 생성 (UTF-8, BOM 없음)"""
    print(f"[INFO] .env 파일 생성 중: {env_file}")

    # 기존 파일이 있으면 백업
    if env_file.exists():
        backup_file = project_root / ".env.backup"
        print(f"[INFO] 기존 .env 파일 백업: {backup_file}")
        backup_file.write_text(env_file.read_text(encoding="utf-8"), encoding="utf-8", newline="\n")

    # .env 파일 생성 (UTF-8, BOM 없음, LF 줄바꿈)
    with open(env_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(env_content)

    print("[OK] .env 파일 생성 완료")
    print(f"[INFO] 파일 위치: {env_file}")

    # 파일 권한 설정 (Windows에서는 chmod가 없으므로 스킵)
    if os.name != "nt":
        os.chmod(env_file, 0o600)
        print("[INFO] 파일 권한 설정: 600")


if __name__ == "__main__":
    try:
        create_env_file()
        print("\n[OK] 작업 완료")
    except OSError as e:
        print(f"\n[ERROR] 에러 발생: {e.__class__.__name__}: {str(e)}")
        raise SystemExit(1)
