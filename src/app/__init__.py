"""
App layer: HTTP 서버 (FastAPI).

역할:
- 뷰 렌더링 결과를 완성 문서 / 스트리밍 응답으로 전달
- 빌드된 클라이언트 번들 서빙
- ⚠️ 문서 조립 로직 없음 (render에 위임)

주의: 폴더 구분
- src/app/templates/ → Jinja2 부분 템플릿 (데모 뷰)
- src/render/assets/ → live-reload 클라이언트 헬퍼
"""
