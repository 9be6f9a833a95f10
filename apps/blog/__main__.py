"""Run the blog list API with uvicorn: python -m apps.blog"""
import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "apps.blog.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3003")),
        reload=os.getenv("ENVIRONMENT", "development") == "development",
    )


if __name__ == "__main__":
    main()
