"""
App layer: 에디터 서버 (FastAPI).

역할:
- 이미지 업로드, 프로젝트 저장/동기화 API
- 에디터 정적 파일 제공, 루트 → 에디터 페이지 리다이렉트
- ⚠️ 인덱스 저장 로직 없음 (core에 위임)

주의: 폴더 구분
- src/app/ → 서버 코드 (이 모듈)
- projects/ → 저장된 프로젝트 HTML + projects.json (레이아웃에 따라 위치 다름)
- public/images/ → 업로드 이미지
"""
