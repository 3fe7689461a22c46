from fastapi import FastAPI, UploadFile, File, HTTPException
from pydantic import BaseModel

from app.viewer import view_source, view_properties


app = FastAPI(title="C# Syntax Tree Viewer")


class SourceIn(BaseModel):
    source: str
    file_name: str = "input.cs"


@app.post("/parse")
def parse(body: SourceIn):
    return view_source(body.source, body.file_name)

@app.post("/analyze")
async def analyze(file: UploadFile = File(...)):
    if not file.filename.endswith(".cs"):
        raise HTTPException(status_code=400, detail="Only .cs files allowed")

    code = await file.read()
    return view_source(code.decode("utf-8", errors="replace"), file.filename)

@app.get("/properties")
def properties(path: str = ""):
    try:
        return view_properties(path)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
