# app.py
# Microburbs Suburb Explorer - any report endpoint, no schema assumed
# Flask + vanilla JS (one page) + canvas bar chart
# Routes:
#   /                    page
#   /api/options         endpoint list + active config
#   /api/url             request URL preview + curl string
#   /api/report          fetch -> summary cards, table, chart ops
#   /proxy/<prefix>/<slug>  token-adding upstream proxy with CORS header
# The page never talks to Microburbs directly; all JSON shaping happens in suburb_explorer.

import os, logging
from flask import Flask, request, Response, jsonify
import requests

from suburb_explorer import Config, ENDPOINT_OPTIONS, ReportFetcher, build_url, curl_command, resolve_slug
from suburb_explorer.config import API_ROOT, PATH_PREFIXES

app = Flask(__name__)
# keep payload key order as the API sent it
app.json.sort_keys = False
app.config["EXPLORER"] = Config.from_env()


def _fetcher():
    return ReportFetcher(app.config["EXPLORER"])


def _target():
    suburb = (request.args.get("suburb") or "").strip()
    slug = resolve_slug(request.args.get("endpoint", ""), request.args.get("custom", ""))
    return suburb, slug

# --------------- UI ---------------

@app.get("/")
def index():
    html = r"""
<!doctype html><html><head><meta charset="utf-8"/>
<title>Microburbs Suburb Explorer</title>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<style>
:root{--ink:#e6edf6;--muted:#93a1b5;--border:#1d2a44;--panel:#0e182a;--bg:#0b152a;--brand:#5b9cff}
*{box-sizing:border-box} body{font-family:Inter,system-ui,-apple-system,Segoe UI,Roboto,Arial;margin:0;background:var(--bg);color:var(--ink)}
header{padding:14px 18px;border-bottom:1px solid var(--border)}
.controls{display:flex;gap:8px;padding:12px 18px;background:var(--panel);align-items:flex-start;flex-wrap:wrap}
.controls input,.controls select{padding:8px;border:1px solid var(--border);border-radius:6px;background:#0b152a;color:var(--ink)}
.controls button{padding:8px 12px;border:1px solid var(--brand);border-radius:6px;background:var(--brand);color:#fff;cursor:pointer}
.controls button:disabled{opacity:.6;cursor:wait}
.custom-slug{display:block;margin-top:6px;width:320px}
.container{padding:16px 18px}
.card{background:var(--panel);border:1px solid var(--border);border-radius:10px;padding:12px;margin-bottom:16px}
.kpis{display:grid;grid-template-columns:repeat(auto-fill,minmax(180px,1fr));gap:12px}
.kpi{border:1px solid var(--border);border-radius:8px;padding:12px}
.kpi .label{font-size:12px;color:var(--muted)} .kpi .value{font-size:22px;font-weight:700;margin-top:2px}
table{border-collapse:collapse;width:100%;font-size:13px} th,td{border-bottom:1px solid var(--border);padding:4px 8px;text-align:left}
.tablewrap{max-height:480px;overflow:auto}
.hidden{display:none}
small.m{color:var(--muted)}
pre,.url{font:12px/1.3 ui-monospace,SFMono-Regular,Menlo,Consolas,monospace;white-space:pre-wrap;word-break:break-all}
</style></head><body>
<header>
  <h2 style="margin:0;">Microburbs Suburb Explorer</h2>
  <div><small class="m">Pick a suburb and a report. Whatever comes back is summarised, tabled and charted.</small></div>
</header>

<section class="controls">
  <input id="suburb" value="Belmont North" placeholder="Belmont North" />
  <div><select id="endpoint"></select></div>
  <button id="fetchBtn">Fetch Data</button>
  <button id="openUrlBtn">Open URL</button>
  <button id="copyCurlBtn">Copy cURL</button>
  <label><input type="checkbox" id="toggleRaw"/> Raw JSON</label>
</section>

<section class="container">
  <div class="url" id="reqUrl"></div>
  <div class="card hidden" id="summary"><div class="kpis" id="summaryCards"></div></div>
  <div class="card hidden" id="chartSection"><small class="m" id="chartNote"></small><div><canvas id="barChart"></canvas></div></div>
  <div class="card hidden" id="tableSection"><small class="m" id="tableNote"></small><div class="tablewrap"><table id="dataTable"></table></div></div>
  <div class="card hidden" id="jsonSection"><pre id="rawJson"></pre></div>
</section>

<script>
const $=s=>document.querySelector(s);let custom=null,busy=false;
const qs=()=>new URLSearchParams({suburb:$("#suburb").value.trim(),endpoint:$("#endpoint").value,custom:custom?custom.value:""});
const hide=(sel,h)=>$(sel).classList.toggle("hidden",h);
function toast(msg){
  const t=document.createElement("div"); t.textContent=msg;
  Object.assign(t.style,{position:"fixed",bottom:"20px",left:"50%",transform:"translateX(-50%)",background:"#0e182a",color:"#e6edf6",
    border:"1px solid #1d2a44",padding:"10px 14px",borderRadius:"10px",zIndex:"9999",boxShadow:"0 6px 22px rgba(0,0,0,.35)"});
  document.body.appendChild(t); setTimeout(()=>t.remove(),1500);
}
async function preview(){ const r=await fetch("/api/url?"+qs()); const j=await r.json(); $("#reqUrl").textContent=j.url; return j; }
function loading(on){
  busy=on; $("#fetchBtn").disabled=on; $("#fetchBtn").textContent=on?"Loading…":"Fetch Data";
  if(on){ hide("#summary",true); hide("#chartSection",true); hide("#tableSection",true); }
}
function raw(obj){ $("#rawJson").textContent=JSON.stringify(obj,null,2); hide("#jsonSection",!$("#toggleRaw").checked); }
function cards(items){
  const box=$("#summaryCards"); box.innerHTML="";
  for(const it of items){ const d=document.createElement("div"); d.className="kpi";
    const l=document.createElement("div"); l.className="label"; l.textContent=it.label;
    const v=document.createElement("div"); v.className="value"; v.textContent=it.value;
    d.append(l,v); box.appendChild(d); }
  hide("#summary",items.length===0);
}
function table(grid){
  const t=$("#dataTable"); t.innerHTML="";
  if(!grid){ hide("#tableSection",true); return; }
  const head=t.createTHead().insertRow(); grid.columns.forEach(c=>{ const th=document.createElement("th"); th.textContent=c; head.appendChild(th); });
  const body=t.createTBody(); grid.rows.forEach(r=>{ const tr=body.insertRow(); r.forEach(c=>{ tr.insertCell().textContent=c; }); });
  $("#tableNote").textContent=grid.note; hide("#tableSection",false);
}
function chart(d){
  if(!d){ hide("#chartSection",true); return; }
  const cv=$("#barChart"), ctx=cv.getContext("2d"); cv.width=d.width; cv.height=d.height;
  for(const op of d.ops){
    ctx.fillStyle=op.fill;
    if(op.kind==="rect") ctx.fillRect(op.x,op.y,op.w,op.h);
    else { ctx.font=op.font; ctx.fillText(op.text,op.x,op.y); }
  }
  $("#chartNote").textContent=d.note; hide("#chartSection",false);
}
async function onFetch(){
  if(busy) return; loading(true);
  try{
    const p=qs(); p.set("width",String(Math.max(240,$("#chartSection").parentElement.clientWidth-20)));
    const r=await fetch("/api/report?"+p); const j=await r.json();
    if(j.error){ raw(j); return; }
    raw(j.data); cards(j.summary); table(j.table); chart(j.chart);
  }catch(e){ raw({error:true,message:String(e),url:$("#reqUrl").textContent}); }
  finally{ loading(false); }
}
(async function init(){
  const o=await (await fetch("/api/options")).json(); const sel=$("#endpoint");
  for(const opt of o.endpoints){ const e=document.createElement("option"); e.value=opt.slug; e.textContent=opt.label; sel.appendChild(e); }
  sel.addEventListener("change",()=>{
    if(sel.value==="__custom__"){
      if(!custom){ custom=document.createElement("input"); custom.className="custom-slug";
        custom.placeholder="Enter custom endpoint slug, e.g., development-applications";
        custom.addEventListener("input",preview); sel.parentElement.appendChild(custom); }
      custom.style.display="block"; custom.focus();
    } else if(custom){ custom.style.display="none"; }
    preview();
  });
  $("#suburb").addEventListener("input",preview);
  $("#fetchBtn").onclick=onFetch;
  $("#openUrlBtn").onclick=async()=>{ const j=await preview(); window.open(j.url,"_blank"); };
  $("#copyCurlBtn").onclick=async()=>{ const j=await preview();
    navigator.clipboard.writeText(j.curl).then(()=>toast("cURL copied!")).catch(()=>alert(j.curl)); };
  $("#toggleRaw").onchange=()=>hide("#jsonSection",!$("#toggleRaw").checked);
  await preview(); onFetch();
})();
</script></body></html>
"""
    return Response(html, content_type="text/html")

# --------------- API routes ---------------

@app.get("/api/options")
def options():
    return jsonify({"endpoints": ENDPOINT_OPTIONS, "config": app.config["EXPLORER"].public()})


@app.get("/api/url")
def request_url():
    suburb, slug = _target()
    url = build_url(app.config["EXPLORER"], suburb, slug)
    return jsonify({"url": url, "curl": curl_command(url), "slug": slug})


@app.get("/api/report")
def report():
    suburb, slug = _target()
    if not suburb:
        return jsonify({"error": "suburb is required"}), 400
    width = request.args.get("width", 800, type=int)
    out = _fetcher().fetch(suburb, slug, width=max(width, 1))
    if out.get("error"):
        app.logger.warning("report %s for %s failed: %s", slug, suburb, out["message"])
    return jsonify(out)

# --------------- Proxy ---------------

@app.get("/proxy/<path:prefix>/<slug>")
def proxy(prefix, slug):
    if prefix not in PATH_PREFIXES:
        return jsonify({"error": f"unknown path prefix '{prefix}'"}), 404
    cfg = app.config["EXPLORER"]
    url = f"{API_ROOT}/{prefix}/{slug}"
    headers = {"Accept": "application/json"}
    # the sandbox is open; the live API needs the token
    if not prefix.startswith("sandbox") and cfg.api_key:
        headers["Authorization"] = f"Bearer {cfg.api_key}"
    try:
        r = requests.get(url, headers=headers, params=request.args.to_dict(), timeout=cfg.timeout)
    except requests.RequestException as e:
        app.logger.warning("proxy %s failed: %s", url, e)
        resp = jsonify({"error": "upstream unreachable", "message": str(e), "url": url})
        resp.status_code = 502
    else:
        app.logger.info("proxy %s -> %s", url, r.status_code)
        resp = Response(r.content, status=r.status_code,
                        content_type=r.headers.get("Content-Type", "application/json"))
    resp.headers["Access-Control-Allow-Origin"] = "*"
    return resp

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    port = int(os.environ.get("PORT","5000"))
    app.run(host="0.0.0.0", port=port, debug=True)
